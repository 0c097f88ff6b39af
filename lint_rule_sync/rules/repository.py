"""Repository for the internal rule maps and the exclusion list."""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Optional

from jsonschema import Draft202012Validator

from lint_rule_sync.constants import (
    CONFIG_DIRNAME,
    ESLINT_RULES_FILENAME,
    TSLINT_RULES_FILENAME,
    UNUSED_TSLINT_RULES_FILENAME,
)
from lint_rule_sync.errors import (
    InvalidConfigSchemaError,
    InvalidJsonFormatError,
    MissingConfigFileError,
)
from lint_rule_sync.models import InternalRuleMap, RuleCatalog
from lint_rule_sync.upstream.schema import schema_error_message
from lint_rule_sync.utils import read_json

logger = logging.getLogger(__name__)

RULE_MAP_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "propertyNames": {"pattern": "^[A-Za-z][A-Za-z0-9]*$"},
    "additionalProperties": {"type": "object"},
}

EXCLUSION_LIST_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "array",
    "items": {"type": "string", "minLength": 1},
}


class RuleCatalogRepository:
    def __init__(self, root: Optional[Path] = None) -> None:
        self._root = root or (Path.home() / ".config" / "lint-rule-sync")

    @property
    def root(self) -> Path:
        return self._root

    @property
    def config_dir(self) -> Path:
        return self.root / CONFIG_DIRNAME

    @property
    def tslint_rules_path(self) -> Path:
        return self.config_dir / TSLINT_RULES_FILENAME

    @property
    def eslint_rules_path(self) -> Path:
        return self.config_dir / ESLINT_RULES_FILENAME

    @property
    def unused_tslint_rules_path(self) -> Path:
        return self.config_dir / UNUSED_TSLINT_RULES_FILENAME

    def load_catalog(self) -> RuleCatalog:
        return RuleCatalog(
            tslint_rules=self.load_rule_map(self.tslint_rules_path),
            eslint_rules=self.load_rule_map(self.eslint_rules_path),
            unused_tslint_rules=self.load_exclusions(self.unused_tslint_rules_path),
        )

    def load_rule_map(self, path: Path) -> InternalRuleMap:
        payload = self._load_validated(path, RULE_MAP_SCHEMA)
        logger.debug("loaded %d rules from %s", len(payload), path)
        return MappingProxyType(
            {name: MappingProxyType(dict(meta)) for name, meta in payload.items()}
        )

    def load_exclusions(self, path: Path) -> tuple[str, ...]:
        if not path.exists():
            return ()
        payload = self._load_validated(path, EXCLUSION_LIST_SCHEMA)
        return tuple(payload)

    def _load_validated(self, path: Path, schema: dict[str, Any]) -> Any:
        if not path.exists():
            raise MissingConfigFileError(path)
        try:
            payload = read_json(path)
        except ValueError as exc:
            raise InvalidJsonFormatError(path, str(exc)) from exc
        error = next(iter(Draft202012Validator(schema).iter_errors(payload)), None)
        if error is not None:
            raise InvalidConfigSchemaError(path, schema_error_message(error))
        return payload
