import logging

DEFAULT_CONFIG = {
    "cyclic": False,
    "width_window": 1,
    "array": None,  # None -> a fresh, empty ObservableList
}

# Older configs spell the window width in camel case.
CONFIG_ALIASES = {
    "widthWindow": "width_window",
}

POSITION_ERROR_MESSAGE = "Error position!"

LOG_FORMAT = "[%(levelname)s] %(asctime)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: int = logging.INFO):
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
