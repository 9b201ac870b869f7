import logging
import sys

from json2dart.core.config import settings


class ContextFormatter(logging.Formatter):
    """Custom formatter that handles optional class_name and strategy fields."""
    def format(self, record):
        # Add default values for class_name and strategy if not present
        if not hasattr(record, 'class_name'):
            record.class_name = '-'
        if not hasattr(record, 'strategy'):
            record.strategy = '-'
        return super().format(record)


def configure_logging(level: str | None = None, stream=None) -> None:
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(ContextFormatter(
        "%(asctime)s %(levelname)s %(name)s [class=%(class_name)s strategy=%(strategy)s] - %(message)s"
    ))
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        handlers=[handler],
    )
