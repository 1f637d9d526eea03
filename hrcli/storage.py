"""Directory-backed JSON storage of people records."""

from __future__ import annotations

import json
import os
from pathlib import Path

from hrcli.models import Human, human_from_dict


class Storage:
    """Keeps one ``<name>.json`` file per person in a directory."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        self.path.mkdir(parents=True, exist_ok=True)

    def _file_for(self, name: str) -> Path:
        return self.path / f"{name}.json"

    def save(self, human: Human) -> None:
        """Write the record, replacing any existing one with the same name."""
        text = json.dumps(human.to_dict(), indent=2, ensure_ascii=False)
        self._file_for(human.name).write_text(text, encoding="utf-8")

    def load(self, name: str) -> Human:
        """Read the record for ``name``; raises FileNotFoundError if absent."""
        return self._read(self._file_for(name))

    def load_all(self) -> list[Human]:
        """Read every ``.json`` record in the directory, ordered by file name."""
        files = sorted(p for p in self.path.iterdir() if p.suffix == ".json")
        return [self._read(p) for p in files]

    def remove(self, name: str) -> None:
        """Delete the record for ``name``; raises FileNotFoundError if absent."""
        self._file_for(name).unlink()

    @staticmethod
    def _read(file_path: Path) -> Human:
        with file_path.open(encoding="utf-8") as handle:
            return human_from_dict(json.load(handle))