import logging
import sys
from config.settings import settings

NOISY_LOGGERS = ["pyodbc", "urllib3", "asyncio"]


def setup_logging(level: str = None):
    """Configura el logging para toda la aplicación"""
    level = (level or settings.logs.level).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    root_logger.handlers = []
    root_logger.addHandler(console_handler)

    for noisy in NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)

    logging.debug(f"Logging configurado - Nivel: {level}")
