"""Unit test configuration.

Every test starts from library default settings, no derivation rules
and no translator, whatever the previous test changed.
"""

from typing import Generator

import pytest

from quantiq.domain.arithmetic import derivations
from quantiq.formatting.formatter import set_default_translator
from quantiq.formatting.settings import default_settings


@pytest.fixture(autouse=True)
def _restore_globals() -> Generator[None, None, None]:
    """Reset process-wide state around each test."""
    default_settings.reset()
    derivations.clear()
    set_default_translator(None)
    yield
    default_settings.reset()
    derivations.clear()
    set_default_translator(None)
