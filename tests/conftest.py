"""
Pytest configuration and fixtures.
"""

import sys
from pathlib import Path
import pytest

# Add project root
sys.path.insert(0, str(Path(__file__).parent.parent))

from timecalc.i18n import set_language
from timecalc.infra.store import InMemoryKeyValueStore, JsonFileKeyValueStore
from timecalc.infra.template_repository import TemplateRepository
from timecalc.services.session import CalculatorSession


@pytest.fixture(autouse=True)
def chinese_output():
    """Run every test with the default Chinese vocabulary"""
    set_language("zh")
    yield
    set_language("zh")


@pytest.fixture
def memory_store():
    """Empty in-memory key-value store"""
    return InMemoryKeyValueStore()


@pytest.fixture
def json_store(tmp_path):
    """JSON file store inside a temporary directory"""
    return JsonFileKeyValueStore(tmp_path / "store.json")


@pytest.fixture
def session(memory_store):
    """Calculator session backed by an in-memory template store"""
    return CalculatorSession(template_repository=TemplateRepository(memory_store))
