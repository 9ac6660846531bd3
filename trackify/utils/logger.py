import logging
import os

_settings = {
    "level": "INFO",
    "log_dir": "logs",
    "log_file": "trackify.log",
}


def configure_logging(config: dict):
    """Set level and log file location for loggers created afterwards."""
    _settings.update(config.get('logging', {}))


def get_logger(name: str) -> logging.Logger:
    log_dir = _settings["log_dir"]
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, _settings["log_file"])

    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(str(_settings["level"]).upper())

        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(name)s - %(message)s')

        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger
