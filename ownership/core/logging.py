import logging
import logging.config
import re

# Owner names are personal data.  Anything logged as ``raw=...`` or
# ``name=...`` is replaced before it reaches a handler.
RAW_NAME_PATTERNS = [
    re.compile(r"(?i)(\braw\s*[=:]\s*)('[^']*'|\"[^\"]*\"|[^,\s]+)"),
    re.compile(r"(?i)(\bname\s*[=:]\s*)('[^']*'|\"[^\"]*\"|[^,\s]+)"),
]


class RawNameFilter(logging.Filter):
    def _sanitize(self, value: object) -> object:
        if not isinstance(value, str):
            return value

        redacted = value
        for pattern in RAW_NAME_PATTERNS:
            redacted = pattern.sub(r"\1[REDACTED]", redacted)
        return redacted

    def filter(self, record: logging.LogRecord) -> bool:
        # Render first so that values interpolated via %s are covered too.
        if record.args:
            try:
                record.msg = record.getMessage()
                record.args = ()
            except (TypeError, ValueError):
                pass
        record.msg = self._sanitize(record.msg)
        return True


def setup_logging() -> None:
    from ownership.core.settings import get_settings

    settings = get_settings()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {
                "raw_name": {
                    "()": "ownership.core.logging.RawNameFilter",
                }
            },
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "filters": ["raw_name"],
                }
            },
            "loggers": {
                "": {
                    "handlers": ["console"],
                    "level": settings.log_level.upper(),
                },
                "uvicorn.access": {
                    "handlers": ["console"],
                    "level": "WARNING",
                    "propagate": False,
                },
            },
        }
    )
