import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


def setup_logging(service_name, level="INFO", log_dir: Optional[str] = None):
    """
    Configure logging for the given service.

    Records go to stderr so that stdout stays reserved for program output.
    When log_dir is given, they are also written to a rotating file:

    {log_dir}/
        {service_name}.log

    :param service_name: Service name (string), also the logger name
    :param level: Log level name or number
    :param log_dir: Optional directory for the log file
    :return: Logger for the service
    """
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    logger = logging.getLogger(service_name)
    logger.setLevel(level)

    # Drop handlers left over from a previous call
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    logger.addHandler(console_handler)

    if log_dir:
        logs_dir = Path(log_dir)
        logs_dir.mkdir(parents=True, exist_ok=True, mode=0o755)

        file_handler = RotatingFileHandler(
            str(logs_dir / f'{service_name}.log'),
            maxBytes=10*1024*1024,  # 10 MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        logger.addHandler(file_handler)

    return logger
