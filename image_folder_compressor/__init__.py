"""
Pacote principal do Image Folder Compressor.

Ideia central:
- Converter todos os arquivos de uma árvore de diretórios em JPEGs menores
  (qualidade + escala), espelhando a árvore no destino.
- Processar os arquivos em paralelo, isolando a falha de cada arquivo.

Módulos principais:
- io: listagem de arquivos e limpeza de diretórios de origem.
- algorithms: codec de imagem (Pillow) e políticas de fator.
- compression: fila de jobs, workers e orquestração.
- cli: ponto de entrada por linha de comando.
"""

from .config import Factor, FolderCompressionConfig
from .compression import Compressor, FolderCompressor, FolderCompressionResult
from .io import list_files, list_dirs, prune

__all__ = [
    "Factor",
    "FolderCompressionConfig",
    "Compressor",
    "FolderCompressor",
    "FolderCompressionResult",
    "list_files",
    "list_dirs",
    "prune",
]
