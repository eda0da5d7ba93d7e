import logging

from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class FileLoggingContext:
    """Context manager that copies all log records into a batch log file.

    The file handler is attached to the root logger, so records from every
    module end up in the file while the existing console handlers keep
    working (unless `suppress_stdout` is set).
    """

    def __init__(
        self,
        log_file_path: Path,
        suppress_stdout: bool = False,
        level: int = logging.DEBUG,
    ):
        """
        Args:
            log_file_path: Log file to write. Parent directories are created.
            suppress_stdout: If True, other root handlers are detached while the
                context is active.
            level: Minimum level written to the file.
        """
        self.log_file_path = Path(log_file_path)
        self.suppress_stdout = suppress_stdout
        self.level = level
        self.file_handler: logging.FileHandler | None = None
        self.detached_handlers: list[logging.Handler] = []

    def __enter__(self) -> Path:
        self.log_file_path.parent.mkdir(parents=True, exist_ok=True)
        self.file_handler = logging.FileHandler(self.log_file_path)
        self.file_handler.setLevel(self.level)
        self.file_handler.setFormatter(logging.Formatter(LOG_FORMAT))

        root_logger = logging.getLogger()
        if self.suppress_stdout:
            self.detached_handlers = root_logger.handlers[:]
            for handler in self.detached_handlers:
                root_logger.removeHandler(handler)
        root_logger.addHandler(self.file_handler)
        return self.log_file_path

    def __exit__(self, exc_type, exc_val, exc_tb):
        root_logger = logging.getLogger()
        if self.file_handler in root_logger.handlers:
            root_logger.removeHandler(self.file_handler)

        # Reattach whatever was detached on entry.
        for handler in self.detached_handlers:
            if handler not in root_logger.handlers:
                root_logger.addHandler(handler)
        self.detached_handlers = []

        if self.file_handler:
            self.file_handler.close()
            self.file_handler = None
