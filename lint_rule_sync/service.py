"""Comparison pipelines: fetch, normalize, diff and format."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Optional

from lint_rule_sync.models import (
    ComparisonOutcome,
    ComparisonReport,
    RuleCatalog,
    SourceId,
    UpstreamSource,
)
from lint_rule_sync.rules.differ import diff
from lint_rule_sync.rules.normalizer import normalize
from lint_rule_sync.rules.reporter import format_report
from lint_rule_sync.rules.repository import RuleCatalogRepository
from lint_rule_sync.tui import ComparisonConsoleUI
from lint_rule_sync.upstream import (
    GitHubContentsClient,
    case_transform,
    contents_path,
    source_for,
)

logger = logging.getLogger(__name__)


class ComparisonService:
    def __init__(
        self, catalog: RuleCatalog, client: Optional[GitHubContentsClient] = None
    ) -> None:
        self.catalog = catalog
        self.client = client or GitHubContentsClient()

    def compare(self, source: UpstreamSource) -> ComparisonReport:
        descriptors = self.client.fetch(contents_path(source))
        exclusions = self.catalog.unused_tslint_rules if source.use_exclusions else None
        upstream = normalize(
            descriptors,
            source.extension,
            case_transform(source),
            exclusions=exclusions,
        )
        internal = self.catalog.rules_for(source.source_id)
        rule_diff = diff(
            upstream, internal.keys(), include_deprecated=source.report_deprecated
        )
        logger.debug(
            "%s: %d upstream, %d internal, %d missing, %d deprecated",
            source.label,
            len(upstream),
            len(internal),
            len(rule_diff.missing),
            len(rule_diff.deprecated),
        )
        text = format_report(
            source.label,
            rule_diff.missing,
            rule_diff.deprecated,
            docs_url=source.docs_url,
        )
        return ComparisonReport(source=source, diff=rule_diff, text=text)

    def run(
        self, sources: Iterable[UpstreamSource], max_workers: int = 2
    ) -> list[ComparisonOutcome]:
        """Run each pipeline concurrently; every one resolves with a report or an error."""
        selected = list(sources)
        if not selected:
            return []
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            futures = [(source, pool.submit(self.compare, source)) for source in selected]
            outcomes: list[ComparisonOutcome] = []
            for source, future in futures:
                try:
                    outcomes.append(
                        ComparisonOutcome(source_id=source.source_id, report=future.result())
                    )
                except Exception as exc:
                    logger.debug("%s comparison failed: %s", source.label, exc)
                    outcomes.append(ComparisonOutcome(source_id=source.source_id, error=exc))
        return outcomes


def _compare_and_print(source_id: SourceId) -> None:
    catalog = RuleCatalogRepository().load_catalog()
    report = ComparisonService(catalog).compare(source_for(source_id))
    ComparisonConsoleUI().render_report(report)


def compare_to_eslint() -> None:
    _compare_and_print(SourceId.ESLINT)


def compare_to_tslint() -> None:
    _compare_and_print(SourceId.TSLINT)
