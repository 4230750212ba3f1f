from __future__ import annotations

"""Batch runner comparing many source/target pairs."""

from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from loguru import logger

from ..config import BatchSettings, PairModel, prepare_text, select_pairs
from ..metrics import dl_distance, osa_distance
from ..scoring.reports import summarise
from ..utils import jsonio


@dataclass
class PairRecord:
    pair_id: str
    source_length: int
    target_length: int
    distance: int
    osa: Optional[int] = None
    normalized: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class BatchRunner:
    def __init__(self, settings: Optional[BatchSettings] = None):
        self.settings = settings or BatchSettings()

    def compare(self, pair: PairModel) -> PairRecord:
        source = prepare_text(pair.source, self.settings)
        target = prepare_text(pair.target, self.settings)
        distance = dl_distance(source, target)
        restricted = (
            osa_distance(source, target) if self.settings.include_osa else None
        )
        logger.debug("pair {} distance={}", pair.id, distance)
        return PairRecord(
            pair_id=pair.id,
            source_length=len(source),
            target_length=len(target),
            distance=distance,
            osa=restricted,
            normalized=self.settings.normalization is not None,
        )

    def run(
        self,
        pairs: Iterable[PairModel],
        *,
        limit: Optional[int] = None,
        run_dir: Optional[Path] = None,
    ) -> List[PairRecord]:
        selected = select_pairs(list(pairs), limit=limit)
        logger.info("Comparing {} pairs", len(selected))
        results = [self.compare(pair) for pair in selected]
        if run_dir is not None:
            persist_run(results, run_dir)
        return results


def persist_run(run_records: Iterable[PairRecord], run_dir: Path) -> None:
    records = list(run_records)
    run_dir.mkdir(parents=True, exist_ok=True)
    rows = [record.to_dict() for record in records]
    jsonio.write_jsonl(run_dir / "results.jsonl", rows)

    table_rows: List[str] = [
        "pair_id\tdistance\tosa\tsource_length\ttarget_length"
    ]
    for record in records:
        restricted = record.osa if record.osa is not None else ""
        table_rows.append(
            f"{record.pair_id}\t{record.distance}\t{restricted}"
            f"\t{record.source_length}\t{record.target_length}"
        )
    (run_dir / "results.tsv").write_text("\n".join(table_rows) + "\n", encoding="utf-8")

    summary = {"generated_at": datetime.now(timezone.utc).isoformat(), **summarise(rows)}
    jsonio.write_json(run_dir / "summary.json", summary)
    logger.info("Wrote {} records to {}", len(records), run_dir)


__all__ = ["BatchRunner", "PairRecord", "persist_run"]
