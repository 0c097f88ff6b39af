import logging
from pathlib import Path
from typing import Any, Dict, Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from lint_rule_sync.constants import DEFAULT_TIMEOUT_SECONDS
from lint_rule_sync.errors import RuleSyncError
from lint_rule_sync.models import SourceId, UpstreamSource
from lint_rule_sync.rules.repository import RuleCatalogRepository
from lint_rule_sync.service import ComparisonService
from lint_rule_sync.tui import ComparisonConsoleUI
from lint_rule_sync.upstream import (
    SOURCE_CATALOG,
    GitHubContentsClient,
    ordered_sources,
    source_for,
)


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _service_from_obj(obj: Dict[str, Any]) -> ComparisonService:
    repository = RuleCatalogRepository(root=obj.get("root"))
    try:
        catalog = repository.load_catalog()
    except RuleSyncError as exc:
        raise click.ClickException(str(exc))
    client = GitHubContentsClient(timeout=obj.get("timeout", DEFAULT_TIMEOUT_SECONDS))
    return ComparisonService(catalog, client)


def _run_sources(
    obj: Dict[str, Any], sources: list[UpstreamSource], summary: bool = False
) -> None:
    ui = ComparisonConsoleUI()
    service = _service_from_obj(obj)
    outcomes = service.run(sources)
    labels = {source_id: source.label for source_id, source in SOURCE_CATALOG.items()}
    ui.render_outcomes(outcomes, labels)
    if summary:
        ui.render_summary(outcomes)
    if any(not outcome.ok for outcome in outcomes):
        raise click.exceptions.Exit(1)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--root",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Config root holding config/*.json (default: ~/.config/lint-rule-sync).",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=DEFAULT_TIMEOUT_SECONDS,
    show_default=True,
    help="Network timeout in seconds for each upstream request.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log diagnostics to stderr.")
@click.pass_context
def cli(
    ctx: click.Context, root: Optional[Path], timeout: float, verbose: bool
) -> None:
    """Compare internal lint rule maps against upstream rule repositories."""
    _configure_logging(verbose)
    ctx.obj = {"root": root, "timeout": timeout}


@cli.command(help="Compare the ESLint rule map against eslint/eslint.")
@click.pass_obj
def eslint(obj: Dict[str, Any]) -> None:
    _run_sources(obj, [source_for(SourceId.ESLINT)])


@cli.command(help="Compare the TSLint rule map against palantir/tslint.")
@click.pass_obj
def tslint(obj: Dict[str, Any]) -> None:
    _run_sources(obj, [source_for(SourceId.TSLINT)])


@cli.command("all", help="Run every comparison concurrently.")
@click.option("--summary", is_flag=True, help="Print a summary table after the reports.")
@click.pass_obj
def all_sources(obj: Dict[str, Any], summary: bool) -> None:
    _run_sources(obj, ordered_sources(), summary=summary)


@cli.command(help="List the upstream rule sources.")
def sources() -> None:
    ComparisonConsoleUI().render_sources(ordered_sources())


def main() -> int:
    try:
        code = cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    return code if isinstance(code, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
