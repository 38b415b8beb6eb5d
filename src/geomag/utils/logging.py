import logging
import os
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class GeoMagLogger:
    def __init__(self, name: str, log_file: Optional[str] = None,
                 level: Union[int, str] = logging.INFO):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(_to_level(level))

        # Console handler
        if not any(getattr(h, '_geomag_console', False) for h in self.logger.handlers):
            console = logging.StreamHandler()
            console.setFormatter(logging.Formatter(LOG_FORMAT))
            console._geomag_console = True
            self.logger.addHandler(console)

        # File handler if specified
        if log_file and not self._has_file_handler(log_file):
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self.logger.addHandler(file_handler)

    def _has_file_handler(self, log_file: str) -> bool:
        path = os.path.abspath(log_file)
        return any(isinstance(h, logging.FileHandler) and h.baseFilename == path
                   for h in self.logger.handlers)

    def debug(self, message: str):
        self.logger.debug(message)

    def info(self, message: str):
        self.logger.info(message)

    def warning(self, message: str):
        self.logger.warning(message)

    def error(self, message: str):
        self.logger.error(message)


def setup_logging(level: Union[int, str] = logging.WARNING,
                  log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the 'geomag' logger tree.

    Safe to call more than once; handlers are not duplicated.
    """
    return GeoMagLogger('geomag', log_file=log_file, level=level).logger


def _to_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown logging level: {level}")
    return value
