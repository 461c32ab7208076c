"""CLI entrypoint for code-linter."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Annotated, NoReturn

import typer

from code_linter import __version__
from code_linter.complexity import classify, describe, score
from code_linter.config import ConfigurationError, LinterConfig, load_config, require_github_token
from code_linter.diff_adapter import iter_patch_units
from code_linter.github import GitHubClient, RemoteError
from code_linter.linting import lint_units
from code_linter.matcher import Matcher
from code_linter.output import Aggregator
from code_linter.rules import RuleSet, RuleSetError, build_rule_set, list_rule_info
from code_linter.traversal import iter_source_units, read_text

app = typer.Typer(
    name="code-linter",
    no_args_is_help=True,
    help="Code quality linter - detect style issues, best practices, and code smells.",
)

logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Print version and exit when --version is provided."""
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option("--version", help="Show version and exit.", callback=version_callback),
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    """Root command callback."""
    _ = version
    try:
        config = load_config()
    except ConfigurationError as exc:
        _fail(str(exc))
    _configure_logging("debug" if verbose else config.log_level)
    ctx.obj = config


@app.command("lint")
def lint_command(
    ctx: typer.Context,
    paths: Annotated[list[Path], typer.Argument(help="Files or directories to lint.")],
    recursive: Annotated[
        bool, typer.Option("--recursive", "-r", help="Lint directories recursively.")
    ] = False,
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Save results to file.")
    ] = None,
    fix: Annotated[bool, typer.Option("--fix", help="Auto-fix issues where possible.")] = False,
    exclude: Annotated[list[str] | None, typer.Option(help="Exclude glob pattern.")] = None,
    disable: Annotated[list[str] | None, typer.Option(help="Rule id to disable.")] = None,
    jobs: Annotated[int, typer.Option(min=1, help="Number of files scanned in parallel.")] = 1,
) -> None:
    """Lint files or directories."""
    config = _config(ctx)
    rule_set = _build_rule_set_or_raise(config, disable)
    logger.debug("Linting %d paths with %d rules", len(paths), len(rule_set))

    units = iter_source_units(paths, recursive=recursive, exclude=exclude)
    aggregator = lint_units(units, Matcher(rule_set), jobs=jobs)

    typer.echo(aggregator.render())
    if fix:
        typer.echo(
            f"\n🔧 {aggregator.fixable_count()} of {aggregator.summary().total} issues are "
            "auto-fixable; no files were modified."
        )
    _write_output(aggregator, output)

    if aggregator.exit_code:
        raise typer.Exit(code=aggregator.exit_code)


@app.command("complexity")
def complexity_command(
    file: Annotated[
        Path,
        typer.Argument(help="File to analyze.", exists=True, dir_okay=False, readable=True),
    ],
) -> None:
    """Check code complexity."""
    try:
        content = read_text(file)
    except OSError as exc:
        _fail(f"Cannot read {file}: {exc}")

    value = score(content)
    level = classify(value)
    color = {"low": "green", "moderate": "yellow", "high": "red"}[level]
    icon = {"low": "✅", "moderate": "⚠️", "high": "❌"}[level]
    typer.echo(f"\n📊 Complexity: {value}\n")
    typer.echo(typer.style(f"{icon} {describe(level)}", fg=color))


@app.command("pr")
def pr_command(
    ctx: typer.Context,
    owner: Annotated[str, typer.Option("--owner", "-o", help="Owner")],
    repo: Annotated[str, typer.Option("--repo", "-r", help="Repo")],
    pr_number: Annotated[int, typer.Option("--pr-number", "-p", min=1, help="PR number")],
    output: Annotated[Path | None, typer.Option("--output", help="Save results to file.")] = None,
    disable: Annotated[list[str] | None, typer.Option(help="Rule id to disable.")] = None,
) -> None:
    """Lint GitHub PR changes."""
    config = _config(ctx)
    try:
        token = require_github_token(config)
    except ConfigurationError as exc:
        _fail(str(exc))
    rule_set = _build_rule_set_or_raise(config, disable)

    client = GitHubClient(token, api_url=config.github_api_url)
    try:
        files = client.list_pull_request_files(owner, repo, pr_number)
    except RemoteError as exc:
        _fail(str(exc))

    aggregator = lint_units(iter_patch_units(files), Matcher(rule_set))
    typer.echo(aggregator.render_pull_request())
    _write_output(aggregator, output)

    if aggregator.exit_code:
        raise typer.Exit(code=aggregator.exit_code)


@app.command("rules")
def rules_command(
    ctx: typer.Context,
    format: Annotated[str, typer.Option(help="Output format: human|json.")] = "human",
) -> None:
    """List available lint rules."""
    output_format = format.lower()
    if output_format not in {"human", "json"}:
        raise typer.BadParameter("format must be one of: human, json", param_hint="--format")

    config = _config(ctx)
    active_ids = set(_build_rule_set_or_raise(config, None).rule_ids)
    rule_info = list_rule_info()

    if output_format == "json":
        payload = {
            "rules": [
                {
                    "rule_id": item.rule_id,
                    "severity": item.severity,
                    "languages": list(item.languages) if item.languages is not None else None,
                    "message": item.message,
                    "fixable": item.fixable,
                    "enabled": item.rule_id in active_ids,
                }
                for item in rule_info
            ]
        }
        typer.echo(json.dumps(payload, sort_keys=True))
        return

    lines = ["Available rules:"]
    for item in rule_info:
        status = "enabled" if item.rule_id in active_ids else "disabled"
        scope = ",".join(item.languages) if item.languages is not None else "all"
        lines.append(f"- {item.rule_id} [{item.severity}, {scope}, {status}] - {item.message}")
    typer.echo("\n".join(lines))


def main() -> None:
    """Console script entrypoint."""
    app()


def _config(ctx: typer.Context) -> LinterConfig:
    if isinstance(ctx.obj, LinterConfig):
        return ctx.obj
    return load_config()


def _build_rule_set_or_raise(config: LinterConfig, disable: list[str] | None) -> RuleSet:
    disabled = [*config.disabled_rules, *(disable or [])]
    try:
        return build_rule_set(disabled_rule_ids=disabled)
    except RuleSetError as exc:
        raise typer.BadParameter(str(exc), param_hint="--disable") from exc


def _write_output(aggregator: Aggregator, output: Path | None) -> None:
    if output is None:
        return
    try:
        saved = aggregator.write(output)
    except OSError as exc:
        _fail(f"Cannot write results to {output}: {exc}")
    typer.echo(f"\n📁 Results saved to: {saved}")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _fail(message: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)
