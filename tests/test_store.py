"""
Tests for key-value stores and template persistence.
"""

import json
import pytest
from timecalc.domain.models import DEFAULT_TEMPLATE, LEGACY_DEFAULT_TEMPLATE
from timecalc.errors import StoreError
from timecalc.infra.store import InMemoryKeyValueStore, JsonFileKeyValueStore, KeyValueStore
from timecalc.infra.template_repository import TEMPLATE_STORAGE_KEY, TemplateRepository


class BrokenStore(KeyValueStore):
    """Store whose every operation fails"""

    def get(self, key):
        raise StoreError("read failed")

    def set(self, key, value):
        raise StoreError("write failed")

    def delete(self, key):
        raise StoreError("delete failed")


class TestInMemoryStore:

    def test_round_trip_and_delete(self, memory_store):
        assert memory_store.get("k") is None
        memory_store.set("k", "v")
        assert memory_store.get("k") == "v"
        memory_store.delete("k")
        memory_store.delete("k")
        assert memory_store.get("k") is None


class TestJsonFileStore:

    def test_file_created_on_first_write(self, json_store):
        assert not json_store.path.exists()
        assert json_store.get("k") is None
        json_store.set("k", "总计")
        assert json_store.path.exists()
        assert json.loads(json_store.path.read_text(encoding="utf-8")) == {"k": "总计"}

    def test_value_survives_new_instance(self, json_store):
        json_store.set("k", "v")
        assert JsonFileKeyValueStore(json_store.path).get("k") == "v"

    def test_other_keys_preserved(self, json_store):
        json_store.set("a", "1")
        json_store.set("b", "2")
        json_store.delete("a")
        assert json_store.get("a") is None
        assert json_store.get("b") == "2"

    def test_corrupt_file_raises_store_error(self, json_store):
        json_store.path.write_text("{not json", encoding="utf-8")
        with pytest.raises(StoreError):
            json_store.get("k")

    def test_non_object_file_raises_store_error(self, json_store):
        json_store.path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(StoreError):
            json_store.get("k")


class TestTemplateRepository:

    def test_default_when_nothing_stored(self, memory_store):
        assert TemplateRepository(memory_store).load() == DEFAULT_TEMPLATE

    def test_saved_template_loaded(self, memory_store):
        repo = TemplateRepository(memory_store)
        assert repo.save("{{hours}}h") is True
        assert TemplateRepository(memory_store).load() == "{{hours}}h"

    def test_legacy_default_migrated(self, memory_store):
        memory_store.set(TEMPLATE_STORAGE_KEY, LEGACY_DEFAULT_TEMPLATE)
        assert TemplateRepository(memory_store).load() == DEFAULT_TEMPLATE
        assert memory_store.get(TEMPLATE_STORAGE_KEY) == DEFAULT_TEMPLATE

    def test_customized_legacy_text_not_migrated(self, memory_store):
        custom = LEGACY_DEFAULT_TEMPLATE + "!"
        memory_store.set(TEMPLATE_STORAGE_KEY, custom)
        assert TemplateRepository(memory_store).load() == custom

    def test_reset(self, memory_store):
        repo = TemplateRepository(memory_store)
        repo.save("x")
        assert repo.reset() == DEFAULT_TEMPLATE
        assert repo.load() == DEFAULT_TEMPLATE

    def test_failing_store_is_tolerated(self):
        repo = TemplateRepository(BrokenStore())
        assert repo.load() == DEFAULT_TEMPLATE
        assert repo.save("x") is False

    def test_default_store_is_in_memory(self):
        repo = TemplateRepository()
        assert isinstance(repo.store, InMemoryKeyValueStore)

    def test_json_backed_repository(self, json_store):
        TemplateRepository(json_store).save("{{totaltime}}")
        assert TemplateRepository(JsonFileKeyValueStore(json_store.path)).load() == "{{totaltime}}"
