import logging
import logging.handlers
from datetime import datetime
from pathlib import Path


def configure_logger(log_level: int = logging.DEBUG, log_dir: Path | None = None) -> list[logging.Handler]:
    """Route emitter log records to the console and, optionally, to a log file

    The emitter only logs through the root logger; hosts that already configure
    logging do not need this. The console output leaves out the timestamp, the log
    file keeps it. The file is named after the current date and time and rotates at
    10 MB.

    Args:
        log_level (int): The log level to log at. Defaults to logging.DEBUG.
        log_dir (Path | None): Directory for the log file. Defaults to console only.

    Returns:
        list[logging.Handler]: The handlers installed on the root logger.
    """
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
    handlers: list[logging.Handler] = [stream_handler]

    if log_dir is not None:
        log_dir.mkdir(exist_ok=True, parents=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / datetime.now().strftime("%Y-%m-%d_%H-%M-%S.log"),
            maxBytes=10 * 1024**2,
            backupCount=5,
        )
        file_handler.setFormatter(
            logging.Formatter("[%(asctime)s] %(levelname)s %(message)s", datefmt="%d.%m.%Y %H:%M:%S")
        )
        handlers.append(file_handler)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)
    return handlers
