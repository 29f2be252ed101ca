import json

import pytest

from launcher.config.errors import (
    ConfigError,
    ConfigFileNotFoundError,
    ConfigReadError,
    MalformedDocumentError,
    MalformedPathError,
    WriteFailedError,
)
from launcher.config.operations import OperationState
from launcher.config.store import ConfigStore
from launcher.packages.reference import PackageReference
from launcher.util.java_heap_size import JavaHeapSize
from launcher.util.os_info import OperatingSystem

from qt_worker_test_util import progress_events, record_signals, run_operation


def test_initial_state_idle(store):
    assert store.reader.state is OperationState.IDLE
    assert store.writer.state is OperationState.IDLE
    assert store.reader.result is None


def test_load_missing_file_fails_with_not_found(store):
    before = store.current_snapshot()
    result = run_operation(store.reader)
    assert result.state is OperationState.FAILED
    assert isinstance(result.error, ConfigFileNotFoundError)
    assert result.error.path == store.storage_location()
    assert store.current_snapshot() is before


def test_load_invalid_json_fails_malformed(store):
    path = store.storage_location()
    path.parent.mkdir(parents=True)
    path.write_text("{ this is not json", encoding="utf-8")
    before = store.current_snapshot()
    result = run_operation(store.reader)
    assert result.state is OperationState.FAILED
    assert isinstance(result.error, MalformedDocumentError)
    assert store.current_snapshot() is before


def test_load_empty_file_fails_malformed(store):
    path = store.storage_location()
    path.parent.mkdir(parents=True)
    path.write_text("", encoding="utf-8")
    result = run_operation(store.reader)
    assert isinstance(result.error, MalformedDocumentError)


def test_load_bad_path_value_keeps_snapshot(store):
    cfg = store.current_snapshot()
    data = json.loads(store.codec.encode(cfg))
    data["game"]["data_dir"] = ""
    path = store.storage_location()
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    result = run_operation(store.reader)
    assert isinstance(result.error, MalformedPathError)
    assert store.current_snapshot() is cfg


def test_load_directory_in_place_of_file_is_read_error(store):
    store.storage_location().mkdir(parents=True)
    result = run_operation(store.reader)
    assert isinstance(result.error, ConfigReadError)


def test_load_installs_decoded_snapshot(store):
    changed = store.current_snapshot().with_changes(locale="ru", cache_game_packages=False)
    path = store.storage_location()
    path.parent.mkdir(parents=True)
    path.write_text(store.codec.encode(changed), encoding="utf-8")
    result = run_operation(store.reader)
    assert result.state is OperationState.SUCCEEDED
    assert result.config == changed
    assert store.current_snapshot() == changed


def test_save_then_load_round_trip(store, launcher_dir):
    cfg = store.current_snapshot()
    saved = cfg.with_changes(
        game=cfg.game.with_changes(
            max_memory=JavaHeapSize.GB_8,
            last_played=PackageReference(id="omega", version="5.3.0"),
        ),
        close_after_game_starts=False,
    )
    store.install_snapshot(saved)
    result = run_operation(store.writer)
    assert result.state is OperationState.SUCCEEDED
    assert result.config is saved
    assert store.storage_location().is_file()

    fresh = ConfigStore(launcher_dir, operating_system=OperatingSystem.LINUX)
    assert fresh.current_snapshot() != saved
    load = run_operation(fresh.reader)
    assert load.state is OperationState.SUCCEEDED
    assert fresh.current_snapshot() == saved


def test_save_creates_parent_directories(store, launcher_dir):
    assert not launcher_dir.exists()
    run_operation(store.writer)
    assert (launcher_dir / "config.json").exists()
    assert not (launcher_dir / "config.json.tmp").exists()


def test_save_writes_pretty_utf8(store):
    store.install_snapshot(store.current_snapshot().with_changes(locale="日本"))
    run_operation(store.writer)
    text = store.storage_location().read_text(encoding="utf-8")
    assert "日本" in text
    assert text.startswith("{\n  ")


def test_save_failure_reports_write_failed(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("a file where a directory should be", encoding="utf-8")
    s = ConfigStore(blocker / "launcher", operating_system=OperatingSystem.LINUX)
    before = s.current_snapshot()
    result = run_operation(s.writer)
    assert result.state is OperationState.FAILED
    assert isinstance(result.error, WriteFailedError)
    assert isinstance(result.error.cause, OSError)
    assert s.current_snapshot() is before


def test_unexpected_error_is_wrapped(store, monkeypatch):
    def boom(_cfg):
        raise ValueError("encoder exploded")

    monkeypatch.setattr(store.codec, "encode", boom)
    result = run_operation(store.writer)
    assert result.state is OperationState.FAILED
    assert type(result.error) is ConfigError
    assert isinstance(result.error.__cause__, ValueError)


def test_signals_on_success(store):
    seen = record_signals(store.writer)
    run_operation(store.writer)
    assert progress_events(seen) == ["encode", "write", "written"]
    assert seen["succeeded"] == [store.current_snapshot()]
    assert seen["failed"] == []
    assert seen["finished"][0].ok


def test_signals_on_failure(store):
    seen = record_signals(store.reader)
    run_operation(store.reader)
    assert progress_events(seen) == ["read"]
    assert len(seen["failed"]) == 1
    assert isinstance(seen["failed"][0], ConfigFileNotFoundError)
    assert seen["finished"][0].state is OperationState.FAILED


def test_load_progress_sequence(store):
    run_operation(store.writer)
    seen = record_signals(store.reader)
    run_operation(store.reader)
    assert progress_events(seen) == ["read", "decode", "installed"]


def test_start_rejected_while_running(store, monkeypatch):
    import threading

    gate = threading.Event()
    entered = threading.Event()
    real_encode = store.codec.encode

    def slow_encode(cfg):
        entered.set()
        gate.wait(5)
        return real_encode(cfg)

    monkeypatch.setattr(store.codec, "encode", slow_encode)
    assert store.writer.start() is True
    assert entered.wait(5)
    assert store.writer.state is OperationState.RUNNING
    assert store.writer.start() is False
    assert store.writer.reset() is False
    gate.set()
    assert store.writer.wait(5000)
    assert store.writer.state is OperationState.SUCCEEDED


def test_operation_is_rearmable(store):
    first = run_operation(store.reader)
    assert first.state is OperationState.FAILED
    run_operation(store.writer)
    second = run_operation(store.reader)
    assert second.state is OperationState.SUCCEEDED
    assert store.reader.reset() is True
    assert store.reader.state is OperationState.IDLE
    assert store.reader.result is None


def test_load_and_save_run_independently(store):
    run_operation(store.writer)
    assert store.reader.start() is True
    assert store.writer.start() is True
    assert store.reader.wait(5000) and store.writer.wait(5000)
    assert store.reader.state is OperationState.SUCCEEDED
    assert store.writer.state is OperationState.SUCCEEDED
    assert store.current_snapshot() == store.codec.decode(
        store.storage_location().read_text(encoding="utf-8")
    )
