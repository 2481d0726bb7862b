import logging.config

def setup_logging(level: str = "INFO") -> None:
    """Configure console logging for the service and its libraries."""
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "verbose": {
                "format": "{levelname} {asctime} {name} {message}",
                "style": "{",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "verbose",
            },
        },
        "root": {
            "handlers": ["console"],
            "level": "WARNING",
        },
        "loggers": {
            "augmented_assistant": {
                "handlers": ["console"],
                "level": level.upper(),
                "propagate": False,
            },
        },
    })
