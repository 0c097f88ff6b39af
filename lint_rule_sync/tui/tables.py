from rich.table import Table
from rich.text import Text

from lint_rule_sync.models import UpstreamSource
from lint_rule_sync.tui.enums import OUTCOME_STATUS_STYLE, UIStyle
from lint_rule_sync.upstream.sources import contents_path


class SourcesTable:
    @staticmethod
    def table(sources: list[UpstreamSource]) -> Table:
        table = Table(show_header=True, header_style="bold", expand=True)
        table.add_column("Source", no_wrap=True)
        table.add_column("Listing")
        table.add_column("Suffix", no_wrap=True)
        table.add_column("Reports", no_wrap=True)
        for source in sources:
            reports = "missing, deprecated" if source.report_deprecated else "missing"
            if source.use_exclusions:
                reports += " (with exclusions)"
            table.add_row(
                source.label,
                contents_path(source),
                source.extension,
                reports,
            )
        return table


class SummaryTable:
    @staticmethod
    def table(rows: list[dict]) -> Table:
        table = Table(show_header=True, header_style="bold", expand=True)
        table.add_column("Source", no_wrap=True)
        table.add_column("Status", no_wrap=True)
        table.add_column("Missing", justify="right")
        table.add_column("Deprecated", justify="right")
        for row in rows:
            style = OUTCOME_STATUS_STYLE.get(row["status"], UIStyle.DIM.value)
            table.add_row(
                row["source"],
                Text(row["status"], style=style),
                str(row["missing"]),
                str(row["deprecated"]),
            )
        return table
