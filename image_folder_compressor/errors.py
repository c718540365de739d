# image_folder_compressor/errors.py

from __future__ import annotations
from pathlib import Path
from typing import Optional


class CompressError(Exception):
    """Falha ao comprimir um único arquivo. Nunca aborta a pasta inteira."""


class AlreadyExistsError(CompressError):
    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(f"The compressed file is already existed! file: {self.path.name}")


class UnsupportedFormatError(CompressError):
    """
    O arquivo não pôde ser decodificado como imagem.

    Diferente das outras falhas, aqui houve efeito colateral: o arquivo original
    foi copiado sem alterações para `copied_to`.
    """

    def __init__(self, source: Path, copied_to: Optional[Path], reason: str = ""):
        self.source = Path(source)
        self.copied_to = copied_to
        msg = f"Cannot convert file {self.source.name} to jpg. Just copy it."
        if reason:
            msg = f"{msg} : {reason}"
        super().__init__(msg)


class CodecError(CompressError):
    pass


class DecodeError(CodecError):
    pass


class EncodeError(CodecError):
    pass


class PruneError(Exception):
    """Falha na limpeza de diretórios de origem."""


class NotEmptyError(PruneError):
    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(f"Directory is not empty! {self.path}")


class InvalidInputError(PruneError):
    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(f"Not a directory Error! {self.path}")
