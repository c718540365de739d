import logging
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
) -> None:
    """
    Configura logging global com um formato padrão.

    Chamar isso no início de CLIs ou scripts principais. Com `log_file`, as
    mensagens também são gravadas em arquivo (modo append).
    """
    # basicConfig não faz nada se o root já tem handlers
    if not logging.getLogger().handlers:
        handlers = [logging.StreamHandler()]
        if log_file is not None:
            handlers.append(logging.FileHandler(log_file, encoding="utf-8", delay=True))
        logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers)

    # Plugins do Pillow logam cada chunk em DEBUG
    logging.getLogger("PIL").setLevel(max(level, logging.INFO))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Retorna um logger com o nome desejado, usando o config global.
    """
    return logging.getLogger(name or "image_folder_compressor")
