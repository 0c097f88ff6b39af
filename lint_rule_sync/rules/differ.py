from __future__ import annotations

from typing import Iterable

from lint_rule_sync.models import RuleDiff


def array_diff(source: Iterable[str], target: Iterable[str]) -> tuple[str, ...]:
    excluded = set(target)
    return tuple(item for item in source if item not in excluded)


def diff(
    upstream: Iterable[str],
    internal_keys: Iterable[str],
    include_deprecated: bool = True,
) -> RuleDiff:
    upstream_names = tuple(upstream)
    internal_names = tuple(internal_keys)
    missing = array_diff(upstream_names, internal_names)
    deprecated: tuple[str, ...] = ()
    if include_deprecated:
        deprecated = array_diff(internal_names, upstream_names)
    return RuleDiff(missing=missing, deprecated=deprecated)
