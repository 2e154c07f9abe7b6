import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_handler = logging.StreamHandler(sys.stdout)
_handler.setFormatter(logging.Formatter(LOG_FORMAT))


def configure_logging(level: str = "INFO") -> None:
    """
    Настраивает корневой логгер: один обработчик в stdout и единый формат.
    Повторный вызов не дублирует обработчики.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    if _handler not in root.handlers:
        root.addHandler(_handler)
