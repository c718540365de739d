# image_folder_compressor/compression/work_queue.py

from __future__ import annotations
import queue
from pathlib import Path
from typing import Iterable, Optional


class WorkQueue:
    """
    Fila de jobs (caminhos de arquivo) compartilhada entre workers.

    - Preenchida uma única vez pelo orquestrador, antes dos workers iniciarem.
    - pop() nunca bloqueia: devolve None quando a fila esvaziou, e como ela
      nunca volta a crescer, None é condição terminal para o worker.
    - Cada job é entregue a exatamente um worker.
    """

    def __init__(self, jobs: Optional[Iterable[Path]] = None):
        self._queue: "queue.SimpleQueue[Path]" = queue.SimpleQueue()
        if jobs is not None:
            for job in jobs:
                self.push(job)

    def push(self, job: Path) -> None:
        self._queue.put(Path(job))

    def pop(self) -> Optional[Path]:
        try:
            return self._queue.get_nowait()
        except queue.Empty:
            return None

    def __len__(self) -> int:
        return self._queue.qsize()

    def empty(self) -> bool:
        return self._queue.empty()
