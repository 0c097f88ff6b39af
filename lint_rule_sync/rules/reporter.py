"""Plain-text drift reports."""

from __future__ import annotations

from typing import Optional, Sequence

from lint_rule_sync.utils import camel_case_to_dash


def _bullets(rules: Sequence[str]) -> list[str]:
    return [f"- {camel_case_to_dash(rule)}" for rule in rules]


def format_report(
    label: str,
    missing: Sequence[str],
    deprecated: Optional[Sequence[str]] = None,
    docs_url: Optional[str] = None,
) -> str:
    lines: list[str] = []
    if missing:
        suffix = f" ({docs_url})" if docs_url else ""
        lines.append(f"Missing {label} rules{suffix}:")
        lines.extend(_bullets(missing))
    if deprecated:
        lines.append(f"Deprecated {label} rules:")
        lines.extend(_bullets(deprecated))
    if not lines:
        lines.append(f"{label} rules are in sync!")
    return "\n".join(lines)
