"""Tests for the key-value storage backends."""

from __future__ import annotations

from perfect_circle.stats.aggregator import StatsAggregator
from perfect_circle.stats.storage import InMemoryStore, JsonFileStore, KeyValueStore


def test_backends_satisfy_protocol(tmp_path):
    assert isinstance(InMemoryStore(), KeyValueStore)
    assert isinstance(JsonFileStore(tmp_path / "s.json"), KeyValueStore)


def test_memory_store_get_set_delete():
    store = InMemoryStore()
    assert store.get("k") is None
    store.set("k", "v")
    assert store.get("k") == "v"
    store.delete("k")
    store.delete("k")
    assert store.get("k") is None


def test_json_file_store_persists_across_instances(tmp_path):
    path = tmp_path / "nested" / "stats.json"
    JsonFileStore(path).set("a", "1")
    JsonFileStore(path).set("b", "2")
    store = JsonFileStore(path)
    assert store.get("a") == "1"
    assert store.get("b") == "2"
    store.delete("a")
    assert JsonFileStore(path).get("a") is None
    assert list(path.parent.glob("*.tmp")) == []


def test_json_file_store_tolerates_bad_file(tmp_path, caplog):
    path = tmp_path / "stats.json"
    path.write_text("{broken", encoding="utf-8")
    store = JsonFileStore(path)
    assert store.get("a") is None
    assert "Could not read store" in caplog.text
    store.set("a", "1")
    assert store.get("a") == "1"


def test_json_file_store_ignores_non_object(tmp_path):
    path = tmp_path / "stats.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert JsonFileStore(path).get("a") is None


def test_stats_survive_restart(tmp_path):
    path = tmp_path / "stats.json"
    StatsAggregator(JsonFileStore(path)).record(64)
    again = StatsAggregator(JsonFileStore(path))
    assert again.stats.best_score == 64
    assert again.stats.total_attempts == 1
