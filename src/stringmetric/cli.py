from __future__ import annotations

"""CLI entrypoint for stringmetric."""

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .config import (
    BatchSettings,
    InputTooLongError,
    PairFileNotFoundError,
    SettingsNotFoundError,
    load_pairs,
    load_settings,
    prepare_text,
)
from .metrics import dl_distance, osa_distance
from .runner.batch import BatchRunner
from .scoring import reports
from .utils.logs import configure_logging

app = typer.Typer(help="Damerau-Levenshtein edit distance between Unicode strings.")
console = Console()


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Log level for stderr output (defaults to $STRINGMETRIC_LOG_LEVEL or WARNING).",
    ),
) -> None:
    configure_logging(log_level)


@app.command()
def distance(
    source: str = typer.Argument(..., help="Source string."),
    target: str = typer.Argument(..., help="Target string."),
    normalize: Optional[str] = typer.Option(
        None, "--normalize", "-n", help="Unicode normalization form (NFC/NFD/NFKC/NFKD)."
    ),
    max_length: Optional[int] = typer.Option(
        None, "--max-length", help="Reject inputs longer than this many characters."
    ),
    show_osa: bool = typer.Option(
        False, "--osa", help="Also print the restricted (optimal string alignment) distance."
    ),
) -> None:
    try:
        settings = BatchSettings(normalization=normalize, max_length=max_length)
        source = prepare_text(source, settings)
        target = prepare_text(target, settings)
    except InputTooLongError as exc:
        console.print(f"[red]Input too long[/red]: {exc}")
        raise typer.Exit(code=1)
    except ValueError as exc:
        console.print(f"[red]Invalid option[/red]: {exc}")
        raise typer.Exit(code=1)

    console.print(str(dl_distance(source, target)))
    if show_osa:
        console.print(f"osa: {osa_distance(source, target)}")


@app.command()
def batch(
    pairs_path: Path = typer.Argument(..., help="JSONL file of {id, source, target} pairs."),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML settings file."
    ),
    limit: Optional[int] = typer.Option(
        None, "--limit", "-l", help="Limit number of pairs processed."
    ),
    run_path: Optional[Path] = typer.Option(
        None, "--run-path", help="Directory to store run artefacts."
    ),
) -> None:
    try:
        settings = load_settings(config) if config is not None else BatchSettings()
        pairs = load_pairs(pairs_path)
    except (SettingsNotFoundError, PairFileNotFoundError) as exc:
        console.print(f"[red]Not found[/red]: {exc}")
        raise typer.Exit(code=1)
    except ValueError as exc:
        console.print(f"[red]Invalid input[/red]: {exc}")
        raise typer.Exit(code=1)

    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    run_dir = run_path or Path("runs") / f"{timestamp}_{pairs_path.stem}"
    try:
        results = BatchRunner(settings).run(pairs, limit=limit, run_dir=run_dir)
    except InputTooLongError as exc:
        console.print(f"[red]Input too long[/red]: {exc}")
        raise typer.Exit(code=1)

    table = Table(title="stringmetric Batch Summary")
    table.add_column("pair_id")
    table.add_column("distance", justify="right")
    table.add_column("osa", justify="right")
    table.add_column("lengths", justify="right")

    for record in results:
        table.add_row(
            record.pair_id,
            str(record.distance),
            "" if record.osa is None else str(record.osa),
            f"{record.source_length}/{record.target_length}",
        )

    console.print(table)
    console.print(f"Artefacts written to [green]{run_dir}[/green]")


@app.command()
def report(
    run_path: Path = typer.Argument(..., help="Run directory containing results.jsonl")
) -> None:
    if not run_path.exists():
        console.print(f"[red]Run path not found:[/red] {run_path}")
        raise typer.Exit(code=1)

    try:
        records = reports.load_results(run_path)
    except FileNotFoundError as exc:
        console.print(f"[red]Not found[/red]: {exc}")
        raise typer.Exit(code=1)
    except ValueError as exc:
        console.print(f"[red]Invalid results[/red]: {exc}")
        raise typer.Exit(code=1)

    target = reports.write_report(run_path, records=records)
    summary = reports.summarise(records)

    table = Table(title="Run Metrics")
    table.add_column("metric")
    table.add_column("value")
    for key, value in summary.items():
        table.add_row(key, f"{value:.3f}" if isinstance(value, float) else str(value))

    console.print(table)
    console.print(f"Report written to [green]{target}[/green]")


if __name__ == "__main__":  # pragma: no cover
    app()
