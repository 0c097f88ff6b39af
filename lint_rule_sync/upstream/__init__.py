from lint_rule_sync.upstream.client import GitHubContentsClient
from lint_rule_sync.upstream.sources import (
    SOURCE_CATALOG,
    case_transform,
    contents_path,
    ordered_sources,
    source_for,
)

__all__ = [
    "GitHubContentsClient",
    "SOURCE_CATALOG",
    "case_transform",
    "contents_path",
    "ordered_sources",
    "source_for",
]
