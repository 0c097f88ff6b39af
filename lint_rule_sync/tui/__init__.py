from lint_rule_sync.tui.renderers import ComparisonConsoleUI

__all__ = ["ComparisonConsoleUI"]
