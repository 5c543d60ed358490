import logging
import os
import typing as T


def parse_boolean(value: T.Optional[str], default: bool = False):
    if value is None:
        return default
    return value.lower() in ("true", "yes", "1")


def set_log_level(level: T.Optional[T.Union[int, str]] = None):
    logging.basicConfig(
        level=logging.ERROR,
        format=(
            "%(asctime)s | %(levelname)-8s | "
            "%(name)s:%(funcName)s:%(lineno)d - %(message)s"
        ),
    )
    level = level or os.getenv("PKGCHANGELOG_LOG_LEVEL") or logging.INFO
    logging.getLogger("pkgchangelog").setLevel(level)


DEBUG = parse_boolean(os.getenv("PKGCHANGELOG_DEBUG"))
