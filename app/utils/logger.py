"""
Logger da aplicação.

Uso: `from app.utils.logger import logger`
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from app.config.settings import LOG_LEVEL, LOG_FILE
from app.utils.prometheus_metrics import record_log

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class PrometheusLogHandler(logging.Handler):
    """Conta cada mensagem emitida em `log_messages_total`."""

    def emit(self, record: logging.LogRecord) -> None:
        record_log(record.levelname)


def configurar_logger(nome: str = "app") -> logging.Logger:
    log = logging.getLogger(nome)
    if log.handlers:
        return log

    log.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    log.addHandler(console)

    if LOG_FILE:
        log_path = Path(LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(log_path, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8")
        file_handler.setFormatter(formatter)
        log.addHandler(file_handler)

    log.addHandler(PrometheusLogHandler())
    log.propagate = False
    return log


logger = configurar_logger()
