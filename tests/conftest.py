import pytest

from blogsum.core.config import Settings, get_settings


def make_settings(**overrides) -> Settings:
    values = {"GEMINI_API_KEY": "test-key", "RATE_LIMIT": 0}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture(autouse=True)
def _clean_state():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
