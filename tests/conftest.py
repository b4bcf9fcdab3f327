"""Configuração do pytest para o projeto hook-relay."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import (  # noqa: E402
    get_base_settings,
    get_github_settings,
    get_relay_settings,
    get_telegram_settings,
)

_CACHED_GETTERS = (
    get_base_settings,
    get_github_settings,
    get_relay_settings,
    get_telegram_settings,
)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings são cacheadas por processo; cada teste parte do ambiente atual."""
    for getter in _CACHED_GETTERS:
        getter.cache_clear()
    yield
    for getter in _CACHED_GETTERS:
        getter.cache_clear()
