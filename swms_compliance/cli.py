# swms_compliance/cli.py
"""
CLI interface for swms-compliance.

Thin presentation layer over the tools/ service layer.
"""

import asyncio
import json
from pathlib import Path

import typer

from swms_compliance.config.loader import get_config_dir, load_config
from swms_compliance.config.schema import SwmsComplianceConfig
from swms_compliance.errors import SwmsComplianceError
from swms_compliance.logging_config import configure_logging

app = typer.Typer(
    name="swms-compliance",
    help="Risk score validation and compliance checking for Safe Work Method Statements.",
    no_args_is_help=True,
)

# Exit status for a document that analyzed cleanly but is not compliant
EXIT_NON_COMPLIANT = 2


def _run(coro):
    """Run async function from sync CLI context."""
    return asyncio.run(coro)


def _load() -> SwmsComplianceConfig:
    config = load_config()
    configure_logging(config.output.verbosity, json_format=False)
    return config


async def _get_store(config: SwmsComplianceConfig):
    """Open the SQLite result store in the config directory."""
    from swms_compliance.models.sqlite_store import SQLiteResultStore

    store = SQLiteResultStore(str(get_config_dir() / config.storage.db_filename))
    await store.initialize()
    return store


_SEVERITY_STYLES = {
    "critical": "bold red",
    "high": "dark_orange",
    "medium": "yellow",
    "low": "blue",
}


def _score_style(score: int) -> str:
    if score >= 90:
        return "green"
    if score >= 80:
        return "yellow"
    if score >= 70:
        return "dark_orange"
    return "red"


def _print_result(result, title: str) -> None:
    """Render a ComplianceResult with rich: scores, verdict, issues (critical first)."""
    from rich.console import Console
    from rich.table import Table

    console = Console()

    scores = Table(title=title, show_header=True, header_style="bold")
    scores.add_column("Measure")
    scores.add_column("Score", justify="right")
    for label, value in (
        ("Overall compliance", result.overall_score),
        ("Risk score accuracy", result.risk_score_accuracy),
        ("Standards compliance", result.standards_compliance),
        ("Legislation compliance", result.legislation_compliance),
    ):
        scores.add_row(label, f"[{_score_style(value)}]{value}%[/]")
    console.print(scores)

    if result.is_compliant:
        console.print("[green]✓ COMPLIANT[/green]")
    else:
        console.print(
            f"[red]✗ NON-COMPLIANT[/red]  {len(result.critical_issues)} critical issue(s)"
        )

    issues = result.issues_by_severity()
    if issues:
        table = Table(show_header=True, header_style="bold", expand=False)
        table.add_column("Severity")
        table.add_column("Category")
        table.add_column("Issue")
        table.add_column("Resolution")
        for issue in issues:
            style = _SEVERITY_STYLES.get(issue.type.value, "")
            table.add_row(
                f"[{style}]{issue.type.value}[/]",
                issue.category.value,
                issue.message,
                issue.resolution or "",
            )
        console.print(table)

    for recommendation in result.recommendations:
        console.print(f"• {recommendation}")


@app.command()
def analyze(
    file: Path = typer.Argument(..., help="SWMS document (JSON or YAML)"),
    trade: str = typer.Option(None, "--trade", "-t", help="Trade type (overrides the document)"),
    document_id: str = typer.Option(
        None, "--document-id", "-d", help="Document ID (overrides the document)"
    ),
    no_save: bool = typer.Option(False, "--no-save", help="Don't store the result"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    report: Path = typer.Option(None, "--report", "-r", help="Write a markdown report to this path"),
):
    """Check a document's risk assessments. Exits 2 when the document is non-compliant."""
    from swms_compliance.compliance.report import ComplianceReportRenderer
    from swms_compliance.models.results import ComplianceResult
    from swms_compliance.tools.analyze_document import analyze_document
    from swms_compliance.tools.documents import load_document

    config = _load()

    try:
        document = load_document(file)
    except SwmsComplianceError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    trade_type = trade or document.trade_type
    if not trade_type:
        typer.echo("Error: no trade type in document; pass --trade", err=True)
        raise typer.Exit(1)
    doc_id = document_id or document.document_id
    save = bool(doc_id) and not no_save

    async def _analyze():
        store = await _get_store(config) if save else None
        try:
            return await analyze_document(
                document.assessments,
                trade_type,
                store=store,
                config=config,
                document_id=doc_id,
                save=save,
            )
        finally:
            if store is not None:
                await store.close()

    try:
        response = _run(_analyze())
    except SwmsComplianceError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    result = ComplianceResult.model_validate(response["result"])

    if report:
        markdown = ComplianceReportRenderer().render(
            result, trade_type=response["trade_type"], document_id=doc_id
        )
        report.write_text(markdown, encoding="utf-8")
        typer.echo(f"Report written to {report}", err=True)

    if as_json:
        typer.echo(json.dumps(response, indent=2))
    else:
        title = f"{doc_id or file.name} ({response['trade_type']})"
        _print_result(result, title)
        if response["saved"]:
            typer.echo(f"Saved result for {doc_id}", err=True)

    if not result.is_compliant:
        raise typer.Exit(EXIT_NON_COMPLIANT)


@app.command()
def correct(
    file: Path = typer.Argument(..., help="SWMS document (JSON or YAML)"),
    as_json: bool = typer.Option(False, "--json", help="Print corrected assessments as JSON"),
):
    """Propose corrected risk scores for a document."""
    from swms_compliance.scoring.corrections import propose_corrections
    from swms_compliance.scoring.matrix import get_bands
    from swms_compliance.tools.documents import load_document

    config = _load()

    try:
        document = load_document(file)
    except SwmsComplianceError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    report = propose_corrections(
        document.assessments, bands=get_bands(config.risk_levels.table), policy=config.policy
    )

    if as_json:
        payload = {
            "riskAssessments": [
                a.model_dump(mode="json", by_alias=True) for a in report.assessments
            ],
            "corrections": [
                {
                    "riskId": c.risk_id,
                    "activity": c.activity,
                    "kind": c.kind.value,
                    "original": c.original,
                    "corrected": c.corrected,
                    "reason": c.reason,
                }
                for c in report.corrections
            ],
        }
        typer.echo(json.dumps(payload, indent=2))
        return

    typer.echo(
        f"{report.valid_count}/{len(report.assessments)} assessment(s) have valid calculations, "
        f"{len(report.corrections)} correction(s) proposed"
    )
    for c in report.corrections:
        typer.echo(
            f"- {c.activity or c.risk_id}: {c.kind.value} {c.original} -> {c.corrected} ({c.reason})"
        )


@app.command()
def matrix(
    table: str = typer.Option(None, "--table", help="Risk level table (defaults to config)"),
):
    """Show the 5x5 risk matrix with risk levels."""
    from rich.console import Console
    from rich.table import Table

    from swms_compliance.scoring.matrix import MAX_FACTOR, MIN_FACTOR, RISK_MATRIX, get_bands

    config = _load()
    try:
        bands = get_bands(table or config.risk_levels.table)
    except SwmsComplianceError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    grid = Table(title=f"Risk matrix ({bands.name})", show_header=True, header_style="bold")
    grid.add_column("Likelihood \\ Consequence")
    for consequence in range(MIN_FACTOR, MAX_FACTOR + 1):
        grid.add_column(str(consequence), justify="center")
    for likelihood, row in RISK_MATRIX.items():
        grid.add_row(
            str(likelihood),
            *(f"{score} {bands.classify(score).value}" for score in row),
        )
    Console().print(grid)


@app.command()
def classify(
    score: int = typer.Argument(..., help="Risk score"),
    table: str = typer.Option(None, "--table", help="Risk level table (defaults to config)"),
):
    """Classify a risk score into a risk level."""
    from swms_compliance.scoring.matrix import get_bands

    config = _load()
    try:
        bands = get_bands(table or config.risk_levels.table)
    except SwmsComplianceError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(bands.classify(score).value)


@app.command("list")
def list_stored():
    """List stored compliance results."""
    from swms_compliance.tools.list_results import list_results

    config = _load()

    async def _list():
        store = await _get_store(config)
        try:
            return await list_results(store=store)
        finally:
            await store.close()

    result = _run(_list())
    rows = result["results"]

    if not rows:
        typer.echo("No results stored.")
        return

    typer.echo(f"{'DOCUMENT':<24} {'TRADE':<12} {'SCORE':<6} {'RISK':<9} VERDICT")
    typer.echo("-" * 72)
    for row in rows:
        verdict = "compliant" if row["is_compliant"] else f"non-compliant ({row['critical_count']} critical)"
        color = typer.colors.GREEN if row["is_compliant"] else typer.colors.RED
        typer.echo(
            f"{row['document_id']:<24} {row['trade_type']:<12} {row['overall_score']:<6} "
            f"{row['risk_level']:<9} " + typer.style(verdict, fg=color)
        )


@app.command()
def show(
    document_id: str = typer.Argument(..., help="Document ID"),
    as_json: bool = typer.Option(False, "--json", help="Print the stored result as JSON"),
):
    """Show the stored compliance result for a document."""
    from swms_compliance.models.results import ComplianceResult
    from swms_compliance.tools.get_result import get_result

    config = _load()

    async def _show():
        store = await _get_store(config)
        try:
            return await get_result(document_id, store=store)
        finally:
            await store.close()

    try:
        response = _run(_show())
    except SwmsComplianceError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(response, indent=2))
        return

    typer.echo(f"Assessed: {response['assessed_at']} ({response['assessment_type']})")
    typer.echo(f"Risk:     {response['risk_level']}")
    _print_result(
        ComplianceResult.model_validate(response["result"]),
        f"{response['document_id']} ({response['trade_type']})",
    )


@app.command()
def delete(document_id: str = typer.Argument(..., help="Document ID")):
    """Delete the stored compliance result for a document."""
    from swms_compliance.validation.sanitize import sanitize_document_id

    config = _load()

    async def _delete():
        store = await _get_store(config)
        try:
            return await store.delete(sanitize_document_id(document_id))
        finally:
            await store.close()

    try:
        deleted = _run(_delete())
    except SwmsComplianceError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if not deleted:
        typer.echo(f"No result stored for document '{document_id}'.", err=True)
        raise typer.Exit(1)
    typer.echo(f"Deleted result for {document_id}.")


if __name__ == "__main__":
    app()
