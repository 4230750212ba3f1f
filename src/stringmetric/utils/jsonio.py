from __future__ import annotations

"""Reading and writing the JSON artefacts of a batch run."""

import json
from pathlib import Path
from typing import Any, Iterable, Iterator, List, Tuple


def write_json(path: Path, payload: Any, *, indent: int = 2) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=indent, ensure_ascii=False)
        handle.write("\n")


def iter_jsonl(path: Path) -> Iterator[Tuple[int, Any]]:
    """Yield ``(line_number, value)`` for every non-blank line of *path*.

    Line numbers are 1-based so they can be quoted in error messages.
    """

    with path.open("r", encoding="utf-8") as handle:
        for line_number, line in enumerate(handle, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                yield line_number, json.loads(line)
            except json.JSONDecodeError as exc:
                raise ValueError(
                    f"Malformed JSON on line {line_number} of {path}: {exc.msg}"
                ) from exc


def read_jsonl(path: Path) -> List[Any]:
    return [value for _, value in iter_jsonl(path)]


def write_jsonl(path: Path, rows: Iterable[Any]) -> int:
    """Write *rows* one per line and return how many were written."""

    path.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with path.open("w", encoding="utf-8") as handle:
        for row in rows:
            handle.write(json.dumps(row, ensure_ascii=False) + "\n")
            count += 1
    return count
