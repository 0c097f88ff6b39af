from typing import Callable

from lint_rule_sync.models import CaseStyle, SourceId, UpstreamSource
from lint_rule_sync.utils import identity, to_camel_case


SOURCE_CATALOG: dict[SourceId, UpstreamSource] = {
    SourceId.ESLINT: UpstreamSource(
        source_id=SourceId.ESLINT,
        label="ESLint",
        owner="eslint",
        repo="eslint",
        path="lib/rules",
        extension=".js",
        case_style=CaseStyle.DASH,
        docs_url="http://eslint.org/docs/rules",
        report_deprecated=True,
        use_exclusions=False,
    ),
    SourceId.TSLINT: UpstreamSource(
        source_id=SourceId.TSLINT,
        label="TSLint",
        owner="palantir",
        repo="tslint",
        path="src/rules",
        extension="Rule.ts",
        case_style=CaseStyle.CAMEL,
        docs_url="http://palantir.github.io/tslint/rules",
        report_deprecated=False,
        use_exclusions=True,
    ),
}

_CASE_TRANSFORMS: dict[CaseStyle, Callable[[str], str]] = {
    CaseStyle.DASH: to_camel_case,
    CaseStyle.CAMEL: identity,
}


def source_for(source: SourceId | str) -> UpstreamSource:
    source_id = source if isinstance(source, SourceId) else SourceId(source)
    return SOURCE_CATALOG[source_id]


def case_transform(source: UpstreamSource) -> Callable[[str], str]:
    return _CASE_TRANSFORMS[source.case_style]


def contents_path(source: UpstreamSource) -> str:
    return f"/repos/{source.owner}/{source.repo}/contents/{source.path}"


def ordered_sources() -> list[UpstreamSource]:
    return [SOURCE_CATALOG[source_id] for source_id in SourceId]
