# image_folder_compressor/compression/file_compressor.py

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import os
import shutil
import tempfile

from ..algorithms import ImageCodec, PillowCodec
from ..config import Factor, FactorCalculator
from ..errors import AlreadyExistsError, DecodeError, UnsupportedFormatError
from ..logging_utils import get_logger


logger = get_logger(__name__)


@dataclass
class Compressor:
    """
    Responsável por comprimir um ÚNICO arquivo para JPEG.

    Fluxo:
    - Destino = <dest_dir>/<stem>.jpg; se já existe e overwrite=False, falha
      sem nenhum efeito colateral.
    - Decodifica a origem; se não for imagem, copia o arquivo como está para
      dest_dir e falha com UnsupportedFormatError.
    - Redimensiona por factor.size_ratio, codifica em JPEG com factor.quality.
    - Escreve o destino e, se delete_source=True, apaga a origem.

    dest_dir precisa existir (o orquestrador cria a árvore de saída).
    """

    source_path: Path
    dest_dir: Path
    factor: Factor = field(default_factory=Factor)
    delete_source: bool = False
    overwrite: bool = False
    codec: ImageCodec = field(default_factory=PillowCodec)
    factor_calculator: Optional[FactorCalculator] = None

    def __post_init__(self):
        self.source_path = Path(self.source_path)
        self.dest_dir = Path(self.dest_dir)

    @property
    def target_path(self) -> Path:
        return self.dest_dir / f"{self.source_path.stem}.jpg"

    def _copy_verbatim(self) -> Path:
        copied_to = self.dest_dir / self.source_path.name
        logger.debug(f"  [COPY] {self.source_path.name} -> {copied_to}")
        shutil.copy(self.source_path, copied_to)
        return copied_to

    def _write_atomic(self, data: bytes, target: Path) -> None:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{target.stem}.", suffix=".tmp", dir=self.dest_dir
        )
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            if self.overwrite:
                os.replace(tmp_name, target)
            else:
                # link falha se o destino já existe, mesmo entre workers
                try:
                    os.link(tmp_name, target)
                except FileExistsError:
                    raise AlreadyExistsError(target) from None
                os.unlink(tmp_name)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    def _should_delete_source(self, target: Path) -> bool:
        if not self.delete_source:
            return False
        try:
            return not self.source_path.samefile(target)
        except OSError:
            return self.source_path.resolve() != target.resolve()

    def compress_to_jpg(self) -> Path:
        """
        Comprime o arquivo e devolve o caminho do JPEG gerado.

        Levanta AlreadyExistsError, UnsupportedFormatError, EncodeError ou OSError.
        """
        target = self.target_path
        if target.exists() and not self.overwrite:
            raise AlreadyExistsError(target)

        try:
            raw = self.codec.decode(self.source_path)
        except DecodeError as e:
            copied_to = self._copy_verbatim()
            raise UnsupportedFormatError(self.source_path, copied_to, str(e)) from e

        factor = self.factor
        if self.factor_calculator is not None:
            file_size = self.source_path.stat().st_size
            factor = self.factor_calculator(raw.width, raw.height, file_size)
            logger.debug(
                f"  factor calculado para {self.source_path.name}: "
                f"quality={factor.quality}, size_ratio={factor.size_ratio}"
            )

        resized = self.codec.resize(raw, factor.size_ratio)
        data = self.codec.encode_jpeg(resized, factor.quality)

        self._write_atomic(data, target)

        if self._should_delete_source(target):
            self.source_path.unlink()

        return target
