# image_folder_compressor/io/cleanup.py

from __future__ import annotations
import shutil
from pathlib import Path
from typing import Union

from ..errors import InvalidInputError, NotEmptyError
from ..logging_utils import get_logger
from .crawler import is_hidden


logger = get_logger(__name__)


def is_prunable(directory: Path) -> bool:
    """
    True se a subárvore de `directory` não contém nenhum arquivo visível.

    Arquivos ocultos (nome começando com ".") não bloqueiam a remoção.
    Links simbólicos são tratados como arquivos, nunca seguidos.
    """
    for entry in directory.iterdir():
        if entry.is_dir() and not entry.is_symlink():
            if not is_prunable(entry):
                return False
        elif not is_hidden(entry):
            logger.debug(f"Conteúdo bloqueando remoção: {entry}")
            return False
    return True


def prune(root: Union[str, Path]) -> None:
    """
    Remove `root` inteiro se nenhum arquivo visível existir em sua subárvore.

    A decisão é tomada para a árvore toda antes de apagar qualquer coisa:
    se algo bloquear, nenhum diretório é removido, nem mesmo sub-ramos vazios.

    Levanta:
    - InvalidInputError se `root` não for um diretório.
    - NotEmptyError se houver conteúdo visível em qualquer nível.
    """
    root = Path(root)
    if not root.is_dir():
        raise InvalidInputError(root)

    if not is_prunable(root):
        raise NotEmptyError(root)

    logger.info(f"Removendo diretório de origem vazio: {root}")
    shutil.rmtree(root)
