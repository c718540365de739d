"""
Orquestração de compressão:

- FolderCompressor: enfileira os arquivos de uma pasta e coordena os workers.
- Compressor: lógica de compressão de um único arquivo (thread-safe).
- WorkQueue: fila compartilhada de jobs.
- ProgressReporter: canal opcional de mensagens de progresso.
"""

from .file_compressor import Compressor
from .folder_compressor import FolderCompressor, FolderCompressionResult
from .progress import ProgressReporter
from .work_queue import WorkQueue

__all__ = [
    "Compressor",
    "FolderCompressor",
    "FolderCompressionResult",
    "ProgressReporter",
    "WorkQueue",
]
