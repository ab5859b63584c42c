from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    # importing settle installs a WARNING filter and configure_logging() installs
    # its own; every test starts from structlog's defaults
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()
