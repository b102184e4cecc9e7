"""CLI interface using typer + rich."""

import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from token_guard.core.config import settings
from token_guard.core.log_config import configure_logging
from token_guard.exceptions import ConfigurationError, TokenGuardError
from token_guard.suggestions.resolver import SuggestionResolver
from token_guard.validators.report_formatter import ReportFormatter, ReportMode
from token_guard.validators.token_validator import TokenValidator

app = typer.Typer(
    name="token-guard",
    help="Find and fix non-semantic design token classes",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


@app.command()
def validate(
    path: Path = typer.Argument(Path("."), help="File or directory to scan"),
    report: ReportMode = typer.Option(
        ReportMode.SUMMARY, "--report", "-r", case_sensitive=False, help="Report mode"
    ),
    fix: bool = typer.Option(False, "--fix", help="Apply exact-match fixes in place"),
    include_tests: bool = typer.Option(False, "--include-tests", help="Also scan *.test.* / *.spec.* files"),
    exception: List[str] = typer.Option(
        [], "--exception", "-e", help="Extra path substring to skip (repeatable)"
    ),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", min=1, help="Parallel file workers"),
    json_output: bool = typer.Option(False, "--json", help="Print the report as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Scan source files for non-semantic token classes."""
    configure_logging("DEBUG" if verbose else settings.LOG_LEVEL)

    if not path.exists():
        err_console.print(f"[red]Path not found: {path}[/red]")
        raise typer.Exit(2)

    run_settings = settings
    if exception:
        run_settings = settings.model_copy(
            update={"EXCEPTIONS": list(settings.EXCEPTIONS) + list(exception)}
        )

    try:
        validator = TokenValidator(run_settings)
        result = validator.validate(
            path, fix=fix, include_tests=include_tests or None, workers=workers
        )
    except (ConfigurationError, TokenGuardError) as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(2)

    if json_output:
        typer.echo(result.to_json())
        raise typer.Exit(result.exit_code)

    formatter = ReportFormatter(run_settings.SUMMARY_VIOLATION_LIMIT)
    console.print(formatter.format(result, report), markup=False, highlight=False, soft_wrap=True)

    if result.has_violations:
        console.print(f"\n[red]{result.total_violations} non-semantic token(s) found[/red]")
    elif result.failures:
        console.print(f"\n[yellow]{len(result.failures)} file(s) could not be scanned[/yellow]")
    else:
        console.print("\n[green]No non-semantic tokens found[/green]")

    raise typer.Exit(result.exit_code)


@app.command()
def explain(
    classes: List[str] = typer.Argument(..., help="Classes to classify"),
    json_output: bool = typer.Option(False, "--json", help="Print results as JSON"),
) -> None:
    """Show category, candidates and hint for individual classes."""
    try:
        options = settings.rule_options()
    except ConfigurationError as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(2)

    resolver = SuggestionResolver(settings.MAX_SUGGESTION_DISTANCE)
    entries = []
    for class_name in classes:
        result, resolution = resolver.classify_and_resolve(class_name, options)
        entries.append({"class": class_name, **result.to_dict(), **resolution.to_dict()})

    if json_output:
        typer.echo(json.dumps(entries, indent=2))
        return

    for entry in entries:
        console.print(_describe_entry(entry), markup=False, highlight=False, soft_wrap=True)


def _describe_entry(entry: dict) -> str:
    if not entry["is_governed"]:
        return f"{entry['class']}: not governed"
    if not entry["is_non_semantic"]:
        return f"{entry['class']}: {entry['category']} (semantic)"

    text = f"{entry['class']}: {entry['category']} (non-semantic)"
    if entry["candidates"]:
        text += " → " + ", ".join(c["replacement"] for c in entry["candidates"])
    elif entry["hint"]:
        text += f" → {entry['hint']}"
    else:
        text += " → no confident suggestion"
    return text


if __name__ == "__main__":
    app()
