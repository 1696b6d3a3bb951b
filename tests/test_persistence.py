from pathlib import Path

import pytest

from dockflow.persistence.filesystem import FileStorage


def test_file_storage_creates_run_directory(tmp_path: Path) -> None:
    storage = FileStorage(root=tmp_path)
    run_dir = storage.make_run_directory(prefix="sales")

    assert run_dir.exists()
    assert run_dir.is_dir()
    assert run_dir.parent == tmp_path / "outputs"
    assert run_dir.name.startswith("sales_")


def test_file_storage_writes_and_reads_json(tmp_path: Path) -> None:
    storage = FileStorage(root=tmp_path)
    run_dir = storage.make_run_directory(prefix="sales")

    report_path = run_dir / "report.json"
    storage.write_json(report_path, {"hello": "world"})

    assert report_path.read_text(encoding="utf-8") == '{\n  "hello": "world"\n}'
    assert storage.read_json(report_path) == {"hello": "world"}


def test_file_storage_read_json_missing_file(tmp_path: Path) -> None:
    storage = FileStorage(root=tmp_path)

    with pytest.raises(FileNotFoundError):
        storage.read_json(tmp_path / "outputs" / "missing.json")
