from __future__ import annotations

"""Helpers for loading and summarising batch results."""

from pathlib import Path
from statistics import mean
from typing import Any, Dict, List

from ..utils import jsonio


def load_results(run_path: Path) -> List[Dict[str, Any]]:
    results_path = run_path / "results.jsonl"
    if not results_path.exists():
        raise FileNotFoundError(f"Results not found at {results_path}")
    return jsonio.read_jsonl(results_path)


def similarity(record: Dict[str, Any]) -> float:
    """Distance scaled into ``[0, 1]`` against its ``len(a) + len(b)`` bound."""

    bound = record.get("source_length", 0) + record.get("target_length", 0)
    if not bound:
        return 1.0
    return 1.0 - record.get("distance", 0) / bound


def summarise(records: List[Dict[str, Any]]) -> Dict[str, Any]:
    if not records:
        return {
            "num_pairs": 0,
            "avg_distance": 0.0,
            "max_distance": 0,
            "min_distance": 0,
            "identical_rate": 0.0,
            "avg_similarity": 0.0,
            "avg_osa_gap": None,
        }

    distances = [record.get("distance", 0) for record in records]
    gaps = [
        record["osa"] - record.get("distance", 0)
        for record in records
        if record.get("osa") is not None
    ]

    return {
        "num_pairs": len(records),
        "avg_distance": mean(distances),
        "max_distance": max(distances),
        "min_distance": min(distances),
        "identical_rate": distances.count(0) / len(records),
        "avg_similarity": mean(similarity(record) for record in records),
        "avg_osa_gap": (mean(gaps) if gaps else None),
    }


def write_report(
    run_path: Path,
    destination: Path | None = None,
    *,
    records: List[Dict[str, Any]] | None = None,
) -> Path:
    if records is None:
        records = load_results(run_path)
    summary = summarise(records)
    target = destination or (run_path / "report.json")
    jsonio.write_json(target, {"summary": summary, "records": records})
    return target
