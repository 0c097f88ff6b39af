"""Turn upstream directory listings into canonical camelCase rule names."""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from lint_rule_sync.models import RuleDescriptor
from lint_rule_sync.utils import to_camel_case


def strip_extension(name: str, extension: str) -> Optional[str]:
    if not name.endswith(extension):
        return None
    return name[: len(name) - len(extension)]


def normalize(
    descriptors: Iterable[RuleDescriptor],
    extension: str,
    transform: Callable[[str], str],
    exclusions: Optional[Iterable[str]] = None,
) -> tuple[str, ...]:
    """Return the rule names found in ``descriptors``.

    Only entries ending with ``extension`` are kept; the suffix is cut off and
    ``transform`` maps what remains to camelCase. Exclusion entries are
    dash-case and are compared after the same camelCase conversion. The result
    keeps upstream order with duplicates dropped, but callers should treat it
    as a set.
    """
    excluded = {to_camel_case(name) for name in exclusions or ()}
    names: list[str] = []
    seen: set[str] = set()
    for descriptor in descriptors:
        stem = strip_extension(descriptor.name, extension)
        if not stem:
            continue
        name = transform(stem)
        if name in excluded or name in seen:
            continue
        seen.add(name)
        names.append(name)
    return tuple(names)
