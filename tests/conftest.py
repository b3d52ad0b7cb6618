from collections.abc import Iterator

import pytest
from loguru import logger

from shellargs import logging_utils


@pytest.fixture(autouse=True)
def _reset_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in ("LOG_LEVEL", "LOG_PROFILE", "QUOTE_STYLE", "OUTPUT_FORMAT"):
        monkeypatch.delenv(f"SHELLARGS_{name}", raising=False)
    yield
    # Sinks added by the CLI point at streams the test runner has closed.
    logger.remove()
    logger.disable("shellargs")
    logging_utils._CONFIGURED = None
