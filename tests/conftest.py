import logging

import pytest
import structlog

from productcode.config import get_settings
from productcode.log import HANDLER_NAME


@pytest.fixture(autouse=True)
def reset_settings_and_logging(monkeypatch):
    """Give every test fresh settings and default logging configuration."""
    for name in (
        "PRODUCTCODE_LOG_LEVEL",
        "PRODUCTCODE_LOG_FORMAT",
        "PRODUCTCODE_DEFAULT_OUTPUT_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)
