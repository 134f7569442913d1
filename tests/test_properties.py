"""
Tests for PropertyStore
"""

from threading import Thread
from unittest.mock import MagicMock

import pytest

from bootenv.config.properties import PropertyStore


class TestPropertyStore:
    def test_get_set(self):
        store = PropertyStore()
        assert store.get("A") is None
        assert store.get("A", "fallback") == "fallback"
        store.set("A", "1")
        assert store.get("A") == "1"
        assert "A" in store
        assert len(store) == 1

    def test_initial_values_copied(self):
        source = {"A": "1"}
        store = PropertyStore(source)
        source["A"] = "2"
        assert store.get("A") == "1"

    def test_remove(self):
        store = PropertyStore({"A": "1"})
        store.remove("A")
        assert "A" not in store
        with pytest.raises(KeyError):
            store.remove("A")

    def test_as_dict_is_copy(self):
        store = PropertyStore({"A": "1"})
        store.as_dict()["A"] = "2"
        assert store.get("A") == "1"

    def test_iteration(self):
        store = PropertyStore({"A": "1", "B": "2"})
        assert sorted(store) == ["A", "B"]

    def test_reads_hold_lock(self):
        store = PropertyStore({"A": "1"})
        store._lock = MagicMock()

        store.get("A")
        "A" in store
        len(store)
        store.as_dict()
        assert store._lock.__enter__.call_count == 4

    def test_concurrent_writes(self):
        store = PropertyStore()

        def writer(prefix):
            for i in range(200):
                store.set(f"{prefix}{i}", str(i))

        threads = [Thread(target=writer, args=(p,)) for p in "abcd"]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(store) == 800


class TestFromFiles:
    """Test loading properties files"""

    def test_later_files_override(self, tmp_path):
        home = tmp_path / "home.properties"
        home.write_text("BOOT_VERSION=2.7.2\nBOOT_CLOJURE_VERSION=1.9.0\n", encoding="utf-8")
        project = tmp_path / "project.properties"
        project.write_text("BOOT_VERSION=2.8.3\n", encoding="utf-8")

        store = PropertyStore.from_files([home, project])
        assert store.get("BOOT_VERSION") == "2.8.3"
        assert store.get("BOOT_CLOJURE_VERSION") == "1.9.0"

    def test_missing_files_skipped(self, tmp_path):
        present = tmp_path / "boot.properties"
        present.write_text("BOOT_EMIT_TARGET=no\n", encoding="utf-8")

        store = PropertyStore.from_files([tmp_path / "absent.properties", present])
        assert store.as_dict() == {"BOOT_EMIT_TARGET": "no"}

    def test_comments_and_valueless_keys(self, tmp_path):
        path = tmp_path / "boot.properties"
        path.write_text("# generated\nBOOT_VERSION=2.8.3\nBARE_KEY\n", encoding="utf-8")

        store = PropertyStore.from_files([path])
        assert store.as_dict() == {"BOOT_VERSION": "2.8.3"}

    def test_no_files(self):
        assert len(PropertyStore.from_files([])) == 0
