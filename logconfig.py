"""JSON-lines logging for the ``wwwaxe`` logger.

The condensing core only emits records on ``logging.getLogger("wwwaxe")``;
the service calls ``configure_logging()`` once to give them a handler.
"""

import json
import logging
import os

LOGGER_NAME = "wwwaxe"


class StructuredFormatter(logging.Formatter):
    """Render each record as one JSON object per line.

    Condense-call statistics passed through ``extra=`` are copied into the
    object when present.
    """

    extra_fields = ("input_chars", "output_chars", "reduction_pct", "core", "markdown")

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_data.update(
            (key, getattr(record, key))
            for key in self.extra_fields
            if getattr(record, key, None) is not None
        )
        if record.exc_info and record.exc_info[0] is not None:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach the JSON handler to the ``wwwaxe`` logger and return it.

    *level* defaults to ``WWWAXE_LOG_LEVEL`` (then ``INFO``).  Calling this
    again only updates the level; handlers are never stacked.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
        # Records stay on this handler only
        logger.propagate = False

    logger.setLevel((level or os.getenv("WWWAXE_LOG_LEVEL", "INFO")).upper())
    return logger
