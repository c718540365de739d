# image_folder_compressor/compression/folder_compressor.py

from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional
import threading

from ..algorithms import ImageCodec, PillowCodec
from ..config import FolderCompressionConfig
from ..errors import CompressError, PruneError
from ..io import list_files, prune
from ..logging_utils import get_logger
from .file_compressor import Compressor
from .progress import ProgressReporter
from .work_queue import WorkQueue


logger = get_logger(__name__)


@dataclass
class FolderCompressionResult:
    """
    Resumo de uma execução.

    pruned: None quando a limpeza não foi pedida (delete_source=False),
    senão True/False conforme a árvore de origem foi removida.
    """
    total: int
    succeeded: int
    failed: int
    pruned: Optional[bool] = None


class _Counters:
    def __init__(self):
        self._lock = threading.Lock()
        self.succeeded = 0
        self.failed = 0

    def record(self, ok: bool) -> None:
        with self._lock:
            if ok:
                self.succeeded += 1
            else:
                self.failed += 1


class FolderCompressor:
    """
    Classe principal para comprimir todos os arquivos de uma pasta.

    Responsabilidades:
    - Listar os arquivos da pasta de origem e enfileirá-los.
    - Disparar `thread_count` workers que esvaziam a fila, delegando cada
      arquivo para um Compressor.
    - Reportar progresso (sink opcional) e, se delete_source=True, remover os
      diretórios de origem que ficaram vazios.

    Uso único: depois de `compress()` a instância não pode ser reutilizada.
    """

    def __init__(
        self,
        config: FolderCompressionConfig,
        progress_sink: Optional[Any] = None,
        codec: Optional[ImageCodec] = None,
    ):
        self.config = config
        self.codec = codec if codec is not None else PillowCodec()
        self.reporter = ProgressReporter(progress_sink)
        self._consumed = False

    def _dest_dir_for(self, job: Path) -> Path:
        rel = job.parent.relative_to(self.config.input_dir)
        return self.config.output_dir / rel

    def _process_job(self, job: Path) -> bool:
        file_name = job.name

        try:
            dest_dir = self._dest_dir_for(job)
        except ValueError:
            self.reporter.failure(f"Cannot strip the prefix of file {file_name}")
            return False

        try:
            dest_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            self.reporter.failure(f"Cannot create the parent directory of file {file_name}: {e}")
            return False

        compressor = Compressor(
            source_path=job,
            dest_dir=dest_dir,
            factor=self.config.factor,
            delete_source=self.config.delete_source,
            overwrite=self.config.overwrite,
            codec=self.codec,
            factor_calculator=self.config.factor_calculator,
        )

        try:
            target = compressor.compress_to_jpg()
        except (CompressError, OSError) as e:
            self.reporter.failure(f"Cannot compress image file {file_name} : {e}")
            return False
        except Exception as e:
            # Falha inesperada de um job não pode derrubar o worker
            logger.exception(f"Erro inesperado comprimindo {job}: {e}")
            self.reporter.failure(f"Cannot compress image file {file_name} : {e}")
            return False

        self.reporter.send(f"Compress complete! File: {target.name}")
        return True

    def _drain(self, queue: WorkQueue, counters: _Counters) -> None:
        """Loop de um worker: consome a fila até ela esvaziar."""
        while True:
            job = queue.pop()
            if job is None:
                break
            counters.record(self._process_job(job))

    def _cleanup(self) -> bool:
        try:
            prune(self.config.input_dir)
        except (PruneError, OSError) as e:
            self.reporter.failure(f"Cannot delete original directories! {e}")
            return False
        self.reporter.send("Delete original directories complete!")
        return True

    def compress(self) -> FolderCompressionResult:
        """
        Ponto de entrada principal.

        Fluxo:
        1. Lista os arquivos da origem (erro aqui aborta tudo, antes dos workers).
        2. Enfileira todos os arquivos.
        3. Executa `thread_count` workers em paralelo e espera todos terminarem.
        4. Se delete_source=True, remove os diretórios de origem vazios.

        Falhas de arquivos individuais são reportadas e não interrompem a execução.
        """
        if self._consumed:
            raise RuntimeError("FolderCompressor.compress() já foi chamado; crie uma nova instância.")
        self._consumed = True

        # 1) Lista arquivos
        logger.info(f"Listando arquivos em: {self.config.input_dir}")
        files = list_files(self.config.input_dir)
        self.reporter.send(f"Total file count: {len(files)}")

        # 2) Enfileira
        queue = WorkQueue(files)
        counters = _Counters()

        # 3) Workers
        thread_count = self.config.thread_count
        if thread_count < 1:
            logger.warning(f"thread_count={thread_count}: nenhum worker será iniciado.")
        else:
            with ThreadPoolExecutor(
                max_workers=thread_count, thread_name_prefix="compress-worker"
            ) as executor:
                futures = [
                    executor.submit(self._drain, queue, counters)
                    for _ in range(thread_count)
                ]
                for fut in futures:
                    fut.result()

        self.reporter.send("Compress complete!")

        result = FolderCompressionResult(
            total=len(files),
            succeeded=counters.succeeded,
            failed=counters.failed,
        )

        # 4) Limpeza da origem
        if self.config.delete_source:
            result.pruned = self._cleanup()

        logger.info(
            f"Compressão concluída: {result.succeeded}/{result.total} ok, {result.failed} falhas."
        )
        return result
