"""File-based persistence for generated reports."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from ..config import settings

_TIMESTAMP_FORMAT = "%Y%m%dT%H%M%S%fZ"


class FileStorage:
    """Thin wrapper around the data root for storing report exports."""

    def __init__(self, root: Path | None = None) -> None:
        self.root = (root or settings.data_root).resolve()
        self.output_root = self.root / "outputs"
        self.output_root.mkdir(parents=True, exist_ok=True)

    def make_run_directory(self, prefix: str = "report") -> Path:
        timestamp = datetime.now(timezone.utc).strftime(_TIMESTAMP_FORMAT)
        path = self.output_root / f"{prefix}_{timestamp}"
        path.mkdir(parents=True, exist_ok=False)
        return path

    def write_json(self, path: Path, data: Any, *, indent: int = 2) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as handle:
            json.dump(data, handle, ensure_ascii=False, indent=indent)

    def read_json(self, path: Path) -> Any:
        if not path.is_file():
            raise FileNotFoundError(path.name)
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
