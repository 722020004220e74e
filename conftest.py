import pytest


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    """
    Drop the cached DA square config around every test and clear layout env
    overrides, so tests that set ANIMICA_DA_* observe their own values.
    """
    from da_square.config import get_config

    for key in ("ANIMICA_DA_SUBTREE_ROOT_THRESHOLD", "ANIMICA_DA_MAX_SQUARE_SIZE"):
        monkeypatch.delenv(key, raising=False)
    get_config.cache_clear()
    yield
    get_config.cache_clear()
