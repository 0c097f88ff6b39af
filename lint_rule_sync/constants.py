from typing import Final


GITHUB_API_HOST: Final[str] = "api.github.com"
USER_AGENT: Final[str] = "tslint-eslint-rules"
DEFAULT_TIMEOUT_SECONDS: Final[float] = 20.0

CONFIG_DIRNAME: Final[str] = "config"
TSLINT_RULES_FILENAME: Final[str] = "tslint-rules.json"
ESLINT_RULES_FILENAME: Final[str] = "eslint-rules.json"
UNUSED_TSLINT_RULES_FILENAME: Final[str] = "unused-tslint-rules.json"
