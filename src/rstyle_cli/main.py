import logging
import sys
from pathlib import Path

import typer
from rstyle_linter.discovery import collect_files
from rstyle_linter.engine import LinterEngine
from rstyle_linter.errors import ConfigError, NoInputError
from rstyle_linter.models import Severity
from rstyle_linter.registry import registry

from .config import load_config
from .reporting import OutputFormat, Reporter

app = typer.Typer(help="R Style Linter - check R scripts against the lab style guide")

LOG_LEVELS = ("debug", "info", "warning", "error")


def _fail(message: str) -> typer.Exit:
    typer.secho(f"Error: {message}", fg=typer.colors.RED, err=True)
    return typer.Exit(code=2)


@app.callback()
def main(
    loglevel: str = typer.Option("warning", "--loglevel", help="Log level: debug, info, warning, error"),
):
    """Configure logging for every command"""
    level = loglevel.lower()
    if level not in LOG_LEVELS:
        raise typer.BadParameter(f"expected one of {', '.join(LOG_LEVELS)}", param_hint="--loglevel")
    logging.basicConfig(
        level=level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


@app.command()
def lint(
    paths: list[Path] = typer.Argument(None, help="Files or directories to lint (default: .)"),
    config_file: Path | None = typer.Option(None, "--config", help="Path to config file"),
    output_format: OutputFormat = typer.Option(OutputFormat.TEXT, "--format", help="Report format"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the report to a file"),
    severity: Severity = typer.Option(Severity.WARNING, help="Minimum severity to show"),
    jobs: int | None = typer.Option(None, min=1, help="Number of worker threads"),
    max_line_length: int | None = typer.Option(None, min=1, help="Override max line length"),
    select: list[str] = typer.Option(None, help="Only run these rule ids"),
    ignore: list[str] = typer.Option(None, help="Skip these rule ids"),
):
    """Run linter on R files"""
    try:
        config = load_config(
            config_file,
            max_line_length=max_line_length,
            select=select or None,
            ignore=ignore or None,
        )
        engine = LinterEngine(config, registry)
        files = collect_files(paths or [Path(".")], config.extensions, config.exclude)
    except (ConfigError, NoInputError) as exc:
        raise _fail(str(exc)) from exc

    sink = output.open("w", encoding="utf-8") if output else None
    reporter = Reporter(output_format, sink, severity)
    try:
        engine.lint_files(files, jobs=jobs, on_report=reporter.add)
    except KeyboardInterrupt:
        reporter.finish()
        typer.secho("Aborted", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=130)
    else:
        reporter.finish()
    finally:
        if sink is not None:
            sink.close()

    raise typer.Exit(code=reporter.exit_code)


@app.command()
def rules(
    config_file: Path | None = typer.Option(None, "--config", help="Path to config file"),
):
    """List available rules"""
    try:
        config = load_config(config_file)
    except ConfigError as exc:
        raise _fail(str(exc)) from exc

    for rule in registry.create_rules(config):
        typer.echo(f"{rule.rule_id} ({rule.name}) [{rule.severity.value}]")
        typer.echo(f"    {rule.description}")


if __name__ == "__main__":
    app()
