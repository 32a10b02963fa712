import os

import pytest

from casetable.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Keep CASETABLE_* variables from the outer environment out of the tests."""
    for name in list(os.environ):
        if name.startswith("CASETABLE_"):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
