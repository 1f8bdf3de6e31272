"""CLI entrypoint for responsive-check."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer

from responsive_check import __version__
from responsive_check.analyzer import analyze_files
from responsive_check.config import AppConfig, load_app_config
from responsive_check.output import (
    render_capture,
    render_json,
    render_run,
    render_section,
    render_visual_summary,
)
from responsive_check.rules import build_rules, list_rule_info
from responsive_check.rules.base import Rule
from responsive_check.visual import BrowserUnavailableError, CaptureResult, run_visual_checks

app = typer.Typer(
    name="responsive-check",
    no_args_is_help=True,
    help="Check static pages for responsive-design problems.",
)


def version_callback(value: bool) -> None:
    """Print version and exit when --version is provided."""
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool,
        typer.Option("--version", help="Show version and exit.", callback=version_callback),
    ] = False,
) -> None:
    """Root command callback."""
    _ = version


@app.command("analyze")
def analyze_command(
    root: Annotated[Path, typer.Option(help="Directory holding the pages.")] = Path("."),
    file: Annotated[
        list[str] | None,
        typer.Option("--file", help="Page file to analyze (repeatable)."),
    ] = None,
    format: Annotated[
        str | None, typer.Option(help="Output format: human|json.", show_default="human")
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to config TOML file."),
    ] = None,
) -> None:
    """Analyze inline stylesheets and exit nonzero when issues are found."""
    app_config = _load_config_or_raise(root, config_file)
    output_format = (format or app_config.format).lower()
    if output_format not in {"human", "json"}:
        raise typer.BadParameter("format must be one of: human, json", param_hint="--format")

    rules = _build_configured_rules_or_raise(app_config)
    run = analyze_files(root, file or app_config.files, rules=rules)

    if output_format == "json":
        typer.echo(render_json(run))
    else:
        typer.echo(render_run(run))

    raise typer.Exit(code=run.report.exit_code)


@app.command("visual")
def visual_command(
    root: Annotated[Path, typer.Option(help="Directory holding the pages.")] = Path("."),
    out: Annotated[
        Path | None, typer.Option(help="Screenshot directory (cleared before each run).")
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to config TOML file."),
    ] = None,
) -> None:
    """Capture screenshots at each viewport and flag layout problems."""
    app_config = _load_config_or_raise(root, config_file)
    visual = app_config.visual
    out_dir = out if out is not None else root / visual.out

    seen_pages: set[str] = set()

    def echo_result(result: CaptureResult) -> None:
        if result.page not in seen_pages:
            seen_pages.add(result.page)
            typer.echo(render_section(f"Testing: {result.page}"))
        typer.echo(render_capture(result))

    typer.echo(render_section("VISUAL RESPONSIVENESS TEST"))
    try:
        run = run_visual_checks(
            root.resolve(),
            out_dir.resolve(),
            pages=visual.pages,
            viewports=visual.viewports,
            settle_ms=visual.settle_ms,
            timeout_ms=visual.timeout_ms,
            on_result=echo_result,
        )
    except BrowserUnavailableError as exc:
        typer.echo(f"⚠️ {exc}", err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(render_visual_summary(run))
    raise typer.Exit(code=run.exit_code)


@app.command("rules")
def rules_command(
    root: Annotated[Path, typer.Option(help="Project path.")] = Path("."),
    format: Annotated[str, typer.Option(help="Output format: human|json.")] = "human",
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to config TOML file."),
    ] = None,
) -> None:
    """List available rules."""
    output_format = format.lower()
    if output_format not in {"human", "json"}:
        raise typer.BadParameter("format must be one of: human, json", param_hint="--format")

    app_config = _load_config_or_raise(root, config_file)
    active_ids = {rule.rule_id for rule in _build_configured_rules_or_raise(app_config)}
    rule_info = list_rule_info()

    if output_format == "json":
        payload = {
            "rules": [
                {
                    "rule_id": item.rule_id,
                    "name": item.name,
                    "description": item.description,
                    "concern": item.concern,
                    "enabled": item.rule_id in active_ids,
                }
                for item in rule_info
            ],
            "meta": {"config_source": app_config.source},
        }
        typer.echo(json.dumps(payload, sort_keys=True))
        return

    lines = ["Available rules:"]
    for item in rule_info:
        status = "enabled" if item.rule_id in active_ids else "disabled"
        lines.append(f"- {item.rule_id} [{status}] - {item.description}")
    typer.echo("\n".join(lines))


def main() -> None:
    """Console script entrypoint."""
    app()


def _load_config_or_raise(root: Path, config_file: Path | None = None) -> AppConfig:
    try:
        return load_app_config(root, config_path=config_file)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="config") from exc


def _build_configured_rules_or_raise(app_config: AppConfig) -> list[Rule]:
    try:
        return build_rules(
            enabled_rule_ids=app_config.rule_enable,
            disabled_rule_ids=app_config.rule_disable,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="config.rules") from exc
