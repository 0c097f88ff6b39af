from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional


InternalRuleMap = Mapping[str, Mapping[str, Any]]

EMPTY_RULE_MAP: InternalRuleMap = MappingProxyType({})


class SourceId(str, Enum):
    ESLINT = "eslint"
    TSLINT = "tslint"


class CaseStyle(str, Enum):
    DASH = "dash"
    CAMEL = "camel"


@dataclass(frozen=True)
class RuleDescriptor:
    name: str


@dataclass(frozen=True)
class UpstreamSource:
    source_id: SourceId
    label: str
    owner: str
    repo: str
    path: str
    extension: str
    case_style: CaseStyle
    docs_url: Optional[str] = None
    report_deprecated: bool = True
    use_exclusions: bool = False


@dataclass(frozen=True)
class RuleCatalog:
    tslint_rules: InternalRuleMap = field(default_factory=lambda: EMPTY_RULE_MAP)
    eslint_rules: InternalRuleMap = field(default_factory=lambda: EMPTY_RULE_MAP)
    unused_tslint_rules: tuple[str, ...] = ()

    def rules_for(self, source_id: SourceId) -> InternalRuleMap:
        if source_id == SourceId.TSLINT:
            return self.tslint_rules
        return self.eslint_rules


@dataclass(frozen=True)
class RuleDiff:
    missing: tuple[str, ...]
    deprecated: tuple[str, ...] = ()

    @property
    def in_sync(self) -> bool:
        return not self.missing and not self.deprecated


@dataclass(frozen=True)
class ComparisonReport:
    source: UpstreamSource
    diff: RuleDiff
    text: str

    @property
    def in_sync(self) -> bool:
        return self.diff.in_sync


@dataclass(frozen=True)
class ComparisonOutcome:
    source_id: SourceId
    report: Optional[ComparisonReport] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.report is not None

    def as_dict(self) -> dict[str, Any]:
        status = "error"
        if self.report is not None:
            status = "in sync" if self.report.in_sync else "drift"
        return {
            "source": self.source_id.value,
            "status": status,
            "missing": len(self.report.diff.missing) if self.report else 0,
            "deprecated": len(self.report.diff.deprecated) if self.report else 0,
            "detail": str(self.error) if self.error is not None else "",
        }
