"""
Algoritmos de imagem de baixo nível:

- Codec: decodificação, redimensionamento e codificação JPEG.
- Políticas de fator (como escolher qualidade / escala por imagem).
"""

from .codec import RawImage, ImageCodec, PillowCodec
from .factor_policy import fixed_factor, SizeBasedFactorPolicy

__all__ = [
    "RawImage",
    "ImageCodec",
    "PillowCodec",
    "fixed_factor",
    "SizeBasedFactorPolicy",
]
