from unittest.mock import MagicMock

import pytest


@pytest.fixture()
def session() -> MagicMock:
    """Stands in for the ``requests.Session`` used by ``GeminiClient``."""
    return MagicMock()
