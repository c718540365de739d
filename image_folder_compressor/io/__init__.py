"""
Módulo de IO: operações de sistema de arquivos usadas pela compressão.

Responsabilidades:
- Listar recursivamente os arquivos de uma árvore de origem.
- Listar subdiretórios imediatos.
- Remover diretórios de origem que ficaram vazios após a compressão.
"""

from .crawler import list_files, list_dirs, is_hidden
from .cleanup import prune, is_prunable

__all__ = [
    "list_files",
    "list_dirs",
    "is_hidden",
    "prune",
    "is_prunable",
]
