"""CLI for the catalog resolver.

Commands:
    resolve <catalog> <candidates>  - Resolve candidates against a catalog file
    compare <a> <b>                 - Show how two labels score against each other
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from catalog_resolver import __version__
from catalog_resolver.config import settings
from catalog_resolver.errors import ResolutionContractError
from catalog_resolver.models import CatalogSnapshot, SuggestionState, VerdictStatus
from catalog_resolver.resolution import (
    EntityResolver,
    VerdictClassifier,
    can_submit,
    parse_candidates,
    score_labels,
)

app = typer.Typer(
    name="catalog-resolver",
    help=f"Catalog resolver {__version__}: map extracted mentions onto catalog records",
    no_args_is_help=True,
)
console = Console()

STATUS_STYLES = {
    VerdictStatus.RESOLVED: "green",
    VerdictStatus.AMBIGUOUS: "yellow",
    VerdictStatus.MISSING: "red",
}

STATE_STYLES = {
    SuggestionState.FACT: "green",
    SuggestionState.SUGGESTION: "dim",
    SuggestionState.ACTION: "bold red",
}


def _load_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        console.print(f"[red]Error:[/red] Cannot read {path}: {escape(str(e))}")
        raise typer.Exit(1) from None
    except json.JSONDecodeError as e:
        console.print(f"[red]Error:[/red] Invalid JSON in {path}: {escape(str(e))}")
        raise typer.Exit(1) from None


@app.command()
def resolve(
    catalog: Annotated[Path, typer.Argument(help="Catalog JSON (entries or grouped collections)")],
    candidates: Annotated[
        Path, typer.Argument(help="Candidates JSON (list or grouped extraction output)")
    ],
    threshold: Annotated[
        Optional[float], typer.Option(help="Fuzzy match threshold (default from config)")
    ] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print verdicts as JSON")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log resolution decisions")] = False,
):
    """Resolve candidate mentions against a catalog snapshot."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    catalog_payload = _load_json(catalog)
    candidates_payload = _load_json(candidates)

    try:
        snapshot = CatalogSnapshot.from_payload(catalog_payload)
        parsed = parse_candidates(candidates_payload)
        resolver = EntityResolver(fuzzy_threshold=threshold)
    except (ResolutionContractError, ValueError, KeyError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from None

    verdicts = resolver.resolve_batch(parsed, snapshot)
    suggestions = VerdictClassifier().classify_all(verdicts)

    if as_json:
        typer.echo(json.dumps([v.to_payload() for v in verdicts], indent=2))
        return

    table = Table(title=f"Resolution ({len(snapshot)} catalog entries)")
    table.add_column("Type", style="cyan")
    table.add_column("Label")
    table.add_column("Status")
    table.add_column("Entity / Candidates")
    table.add_column("Confidence", justify="right")
    table.add_column("State")

    for candidate, verdict, suggestion in zip(parsed, verdicts, suggestions):
        status_style = STATUS_STYLES[verdict.status]
        state_style = STATE_STYLES[suggestion.state]
        if verdict.status == VerdictStatus.RESOLVED:
            target = f"{verdict.entity_id} ({verdict.source.value})"
        elif verdict.status == VerdictStatus.AMBIGUOUS:
            target = ", ".join(f"{c.label} ({c.id})" for c in verdict.candidates)
        else:
            target = "-"
        table.add_row(
            candidate.kind.value,
            escape(candidate.label),
            f"[{status_style}]{verdict.status.value}[/{status_style}]",
            escape(target),
            f"{verdict.confidence:.2f}",
            f"[{state_style}]{suggestion.state.value}[/{state_style}]",
        )

    console.print(table)

    if can_submit(suggestions):
        console.print("\n[green]No blocking mentions.[/green]")
    else:
        blocking = sum(1 for s in suggestions if s.blocks_submission)
        console.print(f"\n[bold red]{blocking} mention(s) must be settled before saving.[/bold red]")


@app.command()
def compare(
    a: Annotated[str, typer.Argument(help="First label")],
    b: Annotated[str, typer.Argument(help="Second label")],
    threshold: Annotated[
        Optional[float], typer.Option(help="Match threshold (default from config)")
    ] = None,
):
    """Show the similarity between two labels and the rule that decided it."""
    if threshold is None:
        threshold = settings.resolution_fuzzy_threshold
    if not 0.0 <= threshold <= 1.0:
        console.print(f"[red]Error:[/red] Threshold must be within [0, 1], got {threshold}")
        raise typer.Exit(1)

    result = score_labels(a, b)
    matched = result.score >= threshold
    verdict = "[green]match[/green]" if matched else "[red]no match[/red]"

    console.print(Panel(
        f"[bold]Score:[/bold] {result.score:.4f}\n"
        f"[bold]Rule:[/bold] {result.rule.value}\n"
        f"[bold]Threshold:[/bold] {threshold}\n"
        f"[bold]Result:[/bold] {verdict}",
        title=escape(f"{a!r} vs {b!r}"),
    ))


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
