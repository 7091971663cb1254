from pathlib import Path

import pytest
from fastapi.testclient import TestClient

LEXICON_DIR = Path(__file__).resolve().parent.parent / "config" / "lexicons"


@pytest.fixture(autouse=True)
def _settings_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("LEXICON_DIR", str(LEXICON_DIR))

    from ownership.core.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def client() -> TestClient:
    from ownership.api.deps import get_lexicon_registry

    get_lexicon_registry.cache_clear()

    from ownership.main import app

    with TestClient(app) as test_client:
        yield test_client

    get_lexicon_registry.cache_clear()
