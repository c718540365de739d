# image_folder_compressor/compression/progress.py

from __future__ import annotations
import logging
from typing import Any, Callable, Optional

from ..logging_utils import get_logger


logger = get_logger(__name__)


class ProgressReporter:
    """
    Canal de progresso fire-and-forget.

    O sink pode ser um objeto tipo queue.Queue (usa `put`) ou um callable que
    recebe uma string. Sem sink, as mensagens vão para o log local.
    Falhas de envio são logadas e engolidas: o sink é só observador.
    """

    def __init__(self, sink: Optional[Any] = None):
        self._deliver: Optional[Callable[[str], Any]] = None
        if sink is not None:
            self._deliver = sink.put if hasattr(sink, "put") else sink

    @property
    def has_sink(self) -> bool:
        return self._deliver is not None

    def send(self, message: str, level: int = logging.INFO) -> None:
        if self._deliver is None:
            logger.log(level, message)
            return
        try:
            self._deliver(message)
        except Exception as e:
            logger.warning(f"Message passing error!: {e}")

    def failure(self, message: str) -> None:
        self.send(message, level=logging.WARNING)
