import argparse
import logging
import queue
import sys
import threading
from pathlib import Path
from typing import List, Optional

from ..config import Factor, FolderCompressionConfig
from ..compression import FolderCompressor
from ..logging_utils import setup_logging, get_logger


logger = get_logger(__name__)

_DONE = object()


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Compress every file under a directory into smaller JPEGs."
    )
    p.add_argument("--input_dir", type=str, required=True, help="Source directory.")
    p.add_argument("--output_dir", type=str, required=True, help="Destination directory (mirrors the source tree).")
    p.add_argument("--threads", type=int, default=1, help="Number of worker threads.")
    p.add_argument("--quality", type=float, default=80.0, help="JPEG quality in (0, 100].")
    p.add_argument("--size_ratio", type=float, default=0.8, help="Resize ratio in (0, 1].")
    p.add_argument("--delete_source", action="store_true", help="Delete sources after successful compression.")
    p.add_argument("--overwrite", action="store_true", help="Overwrite existing .jpg outputs.")
    p.add_argument("--verbose", action="store_true")
    p.add_argument("--log_file", type=str, default=None, help="Also append log lines to this file.")
    return p


def _print_messages(messages: "queue.Queue") -> None:
    while True:
        msg = messages.get()
        if msg is _DONE:
            break
        print(msg)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_argparser()
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.INFO, log_file=args.log_file)

    try:
        factor = Factor(quality=args.quality, size_ratio=args.size_ratio)
    except ValueError as e:
        parser.error(str(e))

    config = FolderCompressionConfig(
        input_dir=Path(args.input_dir),
        output_dir=Path(args.output_dir),
        thread_count=args.threads,
        factor=factor,
        delete_source=args.delete_source,
        overwrite=args.overwrite,
    )

    messages: "queue.Queue" = queue.Queue()
    printer = threading.Thread(target=_print_messages, args=(messages,), daemon=True)
    printer.start()

    try:
        result = FolderCompressor(config, progress_sink=messages).compress()
    except OSError as e:
        logger.error(f"Cannot compress the folder!: {e}")
        return 1
    finally:
        messages.put(_DONE)
        printer.join()

    logger.info(f"{result.succeeded} compressed, {result.failed} failed, {result.total} total.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
