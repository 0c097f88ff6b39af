from rich.console import Console

from lint_rule_sync.models import (
    ComparisonOutcome,
    ComparisonReport,
    SourceId,
    UpstreamSource,
)
from lint_rule_sync.tui.enums import UIStyle
from lint_rule_sync.tui.sections import UISection
from lint_rule_sync.tui.tables import SourcesTable, SummaryTable


class ComparisonConsoleUI:
    def __init__(
        self, console: Console | None = None, error_console: Console | None = None
    ) -> None:
        self.console = console or Console(highlight=False)
        self.error_console = error_console or Console(stderr=True, highlight=False)

    def render_report(self, report: ComparisonReport) -> None:
        self.console.print(report.text, markup=False, highlight=False)
        self.console.print()

    def render_error(self, label: str, error: Exception) -> None:
        self.error_console.print(
            UISection.note(f"{label} error", str(error), style=UIStyle.RED.value)
        )

    def render_outcomes(
        self, outcomes: list[ComparisonOutcome], labels: dict[SourceId, str]
    ) -> None:
        for outcome in outcomes:
            if outcome.report is not None:
                self.render_report(outcome.report)
            elif outcome.error is not None:
                self.render_error(labels[outcome.source_id], outcome.error)

    def render_summary(self, outcomes: list[ComparisonOutcome]) -> None:
        self.console.print(
            UISection.wrap(
                "summary",
                SummaryTable.table([outcome.as_dict() for outcome in outcomes]),
                style=UIStyle.BLUE.value,
            )
        )

    def render_sources(self, sources: list[UpstreamSource]) -> None:
        self.console.print(
            UISection.wrap(
                "upstream sources",
                SourcesTable.table(sources),
                style=UIStyle.CYAN.value,
            )
        )
