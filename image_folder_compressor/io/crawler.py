# image_folder_compressor/io/crawler.py

from __future__ import annotations
from pathlib import Path
from typing import List, Union


PathLike = Union[str, Path]


def is_hidden(path: Path) -> bool:
    return path.name.startswith(".")


def list_files(root: PathLike) -> List[Path]:
    """
    Retorna todos os arquivos regulares sob `root`, recursivamente.

    A lista de entradas cresce enquanto é percorrida: cada diretório encontrado
    tem seus filhos anexados ao final. Arquivos cujo nome começa com "." ficam
    de fora; diretórios ocultos continuam sendo percorridos. Links simbólicos
    para diretórios são ignorados.

    Levanta OSError se `root` (ou qualquer subdiretório) não puder ser lido.
    """
    entries: List[Path] = list(Path(root).iterdir())
    files: List[Path] = []

    i = 0
    while i < len(entries):
        entry = entries[i]
        if entry.is_symlink() and entry.is_dir():
            # links para diretórios não são seguidos (evita ciclos)
            pass
        elif entry.is_dir():
            entries.extend(entry.iterdir())
        elif not is_hidden(entry):
            files.append(entry)
        i += 1

    return files


def list_dirs(root: PathLike) -> List[Path]:
    """Subdiretórios imediatos de `root` (sem recursão)."""
    return [p for p in Path(root).iterdir() if p.is_dir()]
