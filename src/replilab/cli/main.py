"""replilab CLI — built with Typer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import numpy as np
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from replilab.config import ReplicationConfig, config as app_config
from replilab.exceptions import ReplicationError
from replilab.models import ORGANISM_PROFILES, PolymeraseVariant, get_organism
from replilab.sequences import DNA

app = typer.Typer(
    name="replilab",
    help="replilab: DNA replication fork simulator.",
    add_completion=False,
    no_args_is_help=True,
)
console = Console()


def _setup_logging(level: str) -> None:
    if not isinstance(logging.getLevelName(level.upper()), int):
        console.print(f"[red]Error: Unknown log level '{level}'[/red]")
        raise typer.Exit(code=1)
    logging.basicConfig(level=level.upper(), format="%(levelname)s %(name)s: %(message)s")


def _config_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        field = ".".join(str(p) for p in err["loc"])
        parts.append(f"{field}: {err['msg']}")
    return "; ".join(parts)


def _build_run_config(
    organism: str,
    max_steps: Optional[int],
    seed: Optional[int],
    proofreading: bool,
    leading: PolymeraseVariant,
    lagging: PolymeraseVariant,
) -> ReplicationConfig:
    defaults = app_config.replication
    return ReplicationConfig(
        organism=get_organism(organism),
        max_steps=max_steps if max_steps is not None else defaults.max_steps,
        seed=seed if seed is not None else defaults.seed,
        enable_proofreading=proofreading or defaults.enable_proofreading,
        enable_detailed_logging=defaults.enable_detailed_logging,
        leading_polymerase=leading,
        lagging_polymerase=lagging,
        log_level=defaults.log_level,
    )


def _replicate_and_report(
    template_id: str,
    dna: DNA,
    run_config: ReplicationConfig,
    events_path: Optional[Path],
) -> None:
    from replilab.replication.coordinator import ForkCoordinator
    from replilab.replication.events import dump_events

    try:
        coordinator = ForkCoordinator(dna, run_config)
        coordinator.complete_replication(run_config.max_steps)
    except ReplicationError as exc:
        console.print(f"[red]Error: {exc}[/red]")
        raise typer.Exit(code=1)

    stats = coordinator.get_statistics()
    replisome_stats = coordinator.replisome.get_statistics()

    table = Table(title=f"Replication of {template_id} ({len(dna):,} bp)")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Organism", run_config.organism.label)
    table.add_row("Steps", str(stats["steps"]))
    table.add_row("Completion", f"{stats['fork']['completion']:.1f}%")
    table.add_row("Okazaki fragments", str(replisome_stats["completed_fragments"]))
    table.add_row("Average fragment size", f"{replisome_stats['average_fragment_size']:.1f} bp")
    table.add_row("Events", str(stats["total_events"]))
    for event_type, count in stats["event_counts"].items():
        table.add_row(f"  {event_type}", str(count))
    console.print(table)

    if events_path is not None:
        written = dump_events(coordinator.get_all_events(), events_path)
        console.print(f"[green]Wrote {written} events to {events_path}[/green]")


@app.command()
def run(
    fasta: Path = typer.Argument(..., help="Path to template FASTA file"),
    record: Optional[str] = typer.Option(None, "--record", "-r", help="Record id to replicate"),
    organism: str = typer.Option("e_coli", "--organism", help="Organism preset"),
    max_steps: Optional[int] = typer.Option(None, "--max-steps", help="Step budget"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    proofreading: bool = typer.Option(False, "--proofreading", help="Emit proofreading events"),
    leading: PolymeraseVariant = typer.Option(PolymeraseVariant.POL_III, "--leading"),
    lagging: PolymeraseVariant = typer.Option(PolymeraseVariant.POL_III, "--lagging"),
    events: Optional[Path] = typer.Option(None, "--events", "-e", help="Write events as JSON lines"),
    log_level: str = typer.Option(app_config.replication.log_level, "--log-level"),
) -> None:
    """Replicate a template read from a FASTA file."""
    _setup_logging(log_level)
    from replilab.ingestion.fasta import load_template

    try:
        template_id, dna = load_template(fasta, record)
        run_config = _build_run_config(organism, max_steps, seed, proofreading, leading, lagging)
    except (FileNotFoundError, ReplicationError) as exc:
        console.print(f"[red]Error: {exc}[/red]")
        raise typer.Exit(code=1)
    except ValidationError as exc:
        console.print(f"[red]Error: {_config_error(exc)}[/red]")
        raise typer.Exit(code=1)

    _replicate_and_report(template_id, dna, run_config, events)


@app.command()
def simulate(
    length: int = typer.Argument(..., min=1, help="Template length in bp"),
    organism: str = typer.Option("e_coli", "--organism", help="Organism preset"),
    max_steps: Optional[int] = typer.Option(None, "--max-steps", help="Step budget"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    proofreading: bool = typer.Option(False, "--proofreading", help="Emit proofreading events"),
    events: Optional[Path] = typer.Option(None, "--events", "-e", help="Write events as JSON lines"),
    log_level: str = typer.Option(app_config.replication.log_level, "--log-level"),
) -> None:
    """Replicate a random template of LENGTH bp."""
    _setup_logging(log_level)
    try:
        run_config = _build_run_config(
            organism,
            max_steps,
            seed,
            proofreading,
            PolymeraseVariant.POL_III,
            PolymeraseVariant.POL_III,
        )
    except ReplicationError as exc:
        console.print(f"[red]Error: {exc}[/red]")
        raise typer.Exit(code=1)
    except ValidationError as exc:
        console.print(f"[red]Error: {_config_error(exc)}[/red]")
        raise typer.Exit(code=1)

    rng = np.random.default_rng(run_config.seed)
    dna = DNA("".join(rng.choice(np.array(list("ATGC")), size=length)))
    _replicate_and_report(f"random_{length}", dna, run_config, events)


@app.command()
def organisms() -> None:
    """List the organism presets."""
    table = Table(title="Organism presets")
    table.add_column("Name", style="cyan")
    table.add_column("Label")
    table.add_column("Type")
    table.add_column("Speed", justify="right")
    table.add_column("Fragment bp", justify="right")
    table.add_column("Primer nt", justify="right")
    for name, profile in sorted(ORGANISM_PROFILES.items()):
        table.add_row(
            name,
            profile.label,
            profile.kind,
            f"{profile.base_speed:g}",
            "{}-{}".format(*profile.fragment_size_range),
            "{}-{}".format(*profile.primer_length_range),
        )
    console.print(table)


if __name__ == "__main__":
    app()
