import logging
import json

from .config import get_settings


class Counter:
    """Minimal Prometheus-style counter."""

    def __init__(self, name: str, documentation: str):
        self.name = name
        self.documentation = documentation
        self.value = 0.0

    def inc(self, amount: float = 1.0) -> None:
        self.value += amount

    def reset(self) -> None:
        self.value = 0.0

    def render(self) -> str:
        return (
            f"# HELP {self.name} {self.documentation}\n"
            f"# TYPE {self.name} counter\n"
            f"{self.name} {self.value}\n"
        )


_RESERVED_ATTRS = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "taskName",
    "message",
}


class JSONFormatter(logging.Formatter):
    """Simple JSON log formatter including any ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        data = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                data[key] = value
        return json.dumps(data, default=repr)


logger = logging.getLogger("generic_containers")
logger.addHandler(logging.NullHandler())


def configure_logging(stream=None) -> logging.Handler:
    """Send package logs to ``stream`` as JSON at ``CONTAINERS_LOG_LEVEL``.

    Records stop at the package logger once this is called, so a root
    handler does not print them a second time.
    """
    level = get_settings().log_level
    for existing in list(logger.handlers):
        if isinstance(existing.formatter, JSONFormatter):
            logger.removeHandler(existing)
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return handler


# Counters
ARRAY_GROWTH_COUNTER = Counter(
    "array_growths_total", "Number of backing buffer reallocations"
)
EMPTY_COLLECTION_COUNTER = Counter(
    "empty_collection_errors_total", "Number of reads from empty containers"
)

COUNTERS = [
    ARRAY_GROWTH_COUNTER,
    EMPTY_COLLECTION_COUNTER,
]

# Counter name -> settings field holding its alert threshold
THRESHOLD_SETTINGS = {
    "array_growths_total": "growth_alert_threshold",
}


def _check_threshold(name: str, value: float) -> None:
    field = THRESHOLD_SETTINGS.get(name)
    threshold = getattr(get_settings(), field) if field else 0
    if threshold and value >= threshold:
        logger.warning(f"{name} threshold {threshold} reached")


def inc_array_growth(old_capacity: int, new_capacity: int) -> None:
    ARRAY_GROWTH_COUNTER.inc()
    logger.debug(
        "Backing buffer grown",
        extra={"old_capacity": old_capacity, "new_capacity": new_capacity},
    )
    _check_threshold("array_growths_total", ARRAY_GROWTH_COUNTER.value)


def inc_empty_collection(container: str) -> None:
    EMPTY_COLLECTION_COUNTER.inc()
    logger.debug("Read from empty container", extra={"container": container})


def reset_counters() -> None:
    for counter in COUNTERS:
        counter.reset()


def generate_metrics() -> bytes:
    return "".join(counter.render() for counter in COUNTERS).encode()


__all__ = [
    "configure_logging",
    "inc_array_growth",
    "inc_empty_collection",
    "reset_counters",
    "generate_metrics",
    "logger",
]
