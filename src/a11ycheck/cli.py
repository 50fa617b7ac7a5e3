"""Command-line interface for a11ycheck."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Optional

import click
import structlog
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from a11ycheck import __version__
from a11ycheck.config import Config, MonitoringConfig, load_config
from a11ycheck.engine.engine import AuditEngine
from a11ycheck.exceptions import SourceError
from a11ycheck.observability import configure_logging, export_prometheus
from a11ycheck.pipeline import AuditPipeline
from a11ycheck.reporting import export_json, render_report, render_summary

console = Console()
logger = structlog.get_logger(__name__)


def _load(ctx: click.Context) -> Config:
    """Load the configuration once per invocation and configure logging from it."""
    if "config" not in ctx.obj:
        log_level: Optional[str] = ctx.obj["log_level"]
        # The loader may warn before the file's own monitoring section is known.
        configure_logging(MonitoringConfig(log_level=log_level or "WARNING"))
        config = load_config(ctx.obj["config_path"])
        if log_level:
            config.monitoring = config.monitoring.model_copy(update={"log_level": log_level})
        configure_logging(config.monitoring)
        ctx.obj["config"] = config
    return ctx.obj["config"]


@click.group()
@click.version_option(version=__version__)
@click.option("--config", "-c", type=click.Path(exists=True, dir_okay=False), help="Configuration file path")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (overrides the configuration file)",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[str], log_level: Optional[str]) -> None:
    """a11ycheck - Accessibility audit for HTML and HTML-like templates."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = Path(config) if config else None
    ctx.obj["log_level"] = log_level.upper() if log_level else None


@cli.command()
@click.argument("target", default=".")
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Write the issues as JSON to this file")
@click.option("--metrics-file", type=click.Path(dir_okay=False), help="Write Prometheus metrics to this file")
@click.pass_context
def check(ctx: click.Context, target: str, output: Optional[str], metrics_file: Optional[str]) -> None:
    """Audit TARGET: a directory, a single file or an http(s) URL."""
    config = _load(ctx)
    pipeline = AuditPipeline(config)

    try:
        report = asyncio.run(pipeline.audit_target(target))
    except SourceError as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        sys.exit(1)

    for label, reason in report.failures:
        console.print(f"[red]❌ Could not read {escape(label)}: {escape(reason)}[/red]")

    if report.diagnostics:
        render_report(console, report.diagnostics)
        render_summary(console, report.diagnostics)
    elif not report.failures:
        console.print("[green]✅ No accessibility issues found![/green]")

    if output:
        export_json(report.diagnostics, Path(output))
        console.print(f"[green]Results saved to {escape(output)}[/green]")

    if metrics_file:
        Path(metrics_file).write_text(export_prometheus(), encoding="utf-8")

    if report.has_issues:
        sys.exit(1)


@cli.command()
@click.pass_context
def rules(ctx: click.Context) -> None:
    """List the rule catalogue and whether each rule is enabled."""
    config = _load(ctx)
    engine = AuditEngine(config.rule_flags())

    table = Table(title="Accessibility Rules")
    table.add_column("Rule", style="cyan")
    table.add_column("Kinds", style="magenta")
    table.add_column("Description")
    table.add_column("Enabled", justify="center")

    for rule in engine.catalogue:
        enabled = "[green]yes[/green]" if engine.is_enabled(rule) else "[red]no[/red]"
        table.add_row(rule.rule_id, "\n".join(kind.value for kind in rule.kinds), escape(rule.description), enabled)

    console.print(table)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
