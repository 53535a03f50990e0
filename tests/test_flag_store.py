from __future__ import annotations

import json
import threading

from api.services.flag_store import JsonFileFlagStore


def test_flags_survive_a_new_store_instance(tmp_path) -> None:
    path = tmp_path / "flags.json"
    JsonFileFlagStore(path).set_flag("mm_taken_1-11-09:00", True)
    reopened = JsonFileFlagStore(path)
    assert reopened.get_flag("mm_taken_1-11-09:00") is True
    assert reopened.get_flag("mm_notified_1-11-09:00") is False


def test_clear_flag_removes_key(tmp_path) -> None:
    path = tmp_path / "flags.json"
    store = JsonFileFlagStore(path)
    store.set_flag("mm_taken_a", True)
    store.set_flag("mm_notified_a", True)
    store.clear_flag("mm_taken_a")
    assert json.loads(path.read_text(encoding="utf-8")) == {"mm_notified_a": True}


def test_corrupt_document_reads_as_empty(tmp_path) -> None:
    path = tmp_path / "flags.json"
    path.write_text("{not json", encoding="utf-8")
    store = JsonFileFlagStore(path)
    assert store.get_flag("mm_taken_a") is False
    store.set_flag("mm_taken_a", True)
    assert store.get_flag("mm_taken_a") is True


def test_missing_parent_directory_is_created(tmp_path) -> None:
    store = JsonFileFlagStore(tmp_path / "nested" / "flags.json")
    store.set_flag("mm_taken_a", True)
    assert store.get_flag("mm_taken_a") is True


def test_concurrent_writers_keep_every_key(tmp_path) -> None:
    store = JsonFileFlagStore(tmp_path / "flags.json")

    def write(prefix: str) -> None:
        for n in range(100):
            store.set_flag(f"{prefix}{n}", True)

    writers = [
        threading.Thread(target=write, args=("mm_taken_",)),
        threading.Thread(target=write, args=("mm_notified_",)),
    ]
    for writer in writers:
        writer.start()
    for writer in writers:
        writer.join()

    missing = [
        f"{prefix}{n}"
        for prefix in ("mm_taken_", "mm_notified_")
        for n in range(100)
        if not store.get_flag(f"{prefix}{n}")
    ]
    assert missing == []
