"""
Unit tests for the persisted counter / deleted-item store.
"""
import json

import pytest

from launchgrid.constants import DEPRIORITIZED
from launchgrid.state import default_state, load_state, save_state
from launchgrid.store import LaunchItemStore


@pytest.fixture
def store(qapp, tmp_path):
    s = LaunchItemStore(tmp_path / "launcher_state.json")
    yield s
    s.flush()


class TestState:
    def test_defaults_when_missing(self, tmp_path):
        assert load_state(tmp_path / "nope.json") == default_state()

    def test_defaults_when_corrupt(self, tmp_path):
        p = tmp_path / "launcher_state.json"
        p.write_text("{not json", encoding="utf-8")
        assert load_state(p) == default_state()

    def test_missing_keys_filled(self, tmp_path):
        p = tmp_path / "launcher_state.json"
        p.write_text(json.dumps({"counters": {"a/main.py": 2}}), encoding="utf-8")
        state = load_state(p)
        assert state["counters"] == {"a/main.py": 2}
        assert state["deleted"] == []
        assert state["settings"] == default_state()["settings"]

    def test_save_and_load(self, tmp_path):
        p = tmp_path / "sub" / "launcher_state.json"
        state = default_state()
        state["counters"]["a/main.py"] = DEPRIORITIZED
        state["deleted"].append("shortcut/x")
        save_state(p, state)
        assert load_state(p) == state


class TestLaunchItemStore:
    def test_record_launch_creates_and_increments(self, store):
        store.record_launch("a/main.py")
        store.record_launch("a/main.py")
        assert store.counters() == {"a/main.py": 2}

    def test_deprioritize_sets_sentinel(self, store):
        store.record_launch("a/main.py")
        store.deprioritize("a/main.py")
        assert store.counters()["a/main.py"] == DEPRIORITIZED

    def test_undeprioritize_discards_history(self, store):
        for _ in range(5):
            store.record_launch("a/main.py")
        store.deprioritize("a/main.py")
        store.undeprioritize("a/main.py")
        assert "a/main.py" not in store.counters()

    def test_record_launch_keeps_sentinel(self, store):
        store.deprioritize("a/main.py")
        store.record_launch("a/main.py")
        assert store.counters()["a/main.py"] == DEPRIORITIZED

    def test_counters_changed_emits_full_snapshot(self, store):
        seen = []
        store.countersChanged.connect(seen.append)
        store.record_launch("a/main.py")
        store.record_launch("b/main.py")
        assert seen == [{"a/main.py": 1}, {"a/main.py": 1, "b/main.py": 1}]

    def test_snapshot_is_a_copy(self, store):
        snapshot = store.counters()
        store.record_launch("a/main.py")
        assert snapshot == {}

    def test_delete_item(self, store):
        seen = []
        store.deletedChanged.connect(seen.append)
        store.delete_item("shortcut/x")
        store.delete_item("shortcut/x")
        assert store.deleted_items() == frozenset({"shortcut/x"})
        assert seen == [frozenset({"shortcut/x"})]

    def test_writes_persisted_in_order(self, qapp, tmp_path):
        path = tmp_path / "launcher_state.json"
        s = LaunchItemStore(path)
        for _ in range(20):
            s.record_launch("a/main.py")
        s.deprioritize("b/main.py")
        s.delete_item("shortcut/x")
        s.flush()

        reloaded = LaunchItemStore(path)
        assert reloaded.counters() == {"a/main.py": 20, "b/main.py": DEPRIORITIZED}
        assert reloaded.deleted_items() == frozenset({"shortcut/x"})
