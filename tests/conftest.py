import pytest


@pytest.fixture(autouse=True)
def _fresh_observability():
    from generic_containers import observability
    from generic_containers.config import get_settings

    observability.reset_counters()
    get_settings.cache_clear()
    logger = observability.logger
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
    get_settings.cache_clear()
