from pathlib import Path
from typing import Optional


class RuleSyncError(Exception):
    """Base user-facing application error."""


class RuleSyncFileError(RuleSyncError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class MissingConfigFileError(RuleSyncFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Missing required config file")


class InvalidJsonFormatError(RuleSyncFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid JSON format ({detail})")


class InvalidConfigSchemaError(RuleSyncFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config schema ({detail})")


class UpstreamError(RuleSyncError):
    def __init__(self, url: str, message: str) -> None:
        self.url = url
        self.message = message
        super().__init__(f"{message}: {url}")


class NetworkError(UpstreamError):
    def __init__(self, url: str, reason: str) -> None:
        self.reason = reason
        super().__init__(url=url, message=f"Network error ({reason})")


class UpstreamFormatError(UpstreamError):
    def __init__(self, url: str, detail: str) -> None:
        self.detail = detail
        super().__init__(url=url, message=f"Upstream response is not valid JSON ({detail})")


class UpstreamShapeError(UpstreamError):
    def __init__(self, url: str, detail: str, status: Optional[int] = None) -> None:
        self.detail = detail
        self.status = status
        prefix = f"HTTP {status}, " if status is not None else ""
        super().__init__(
            url=url, message=f"Unexpected upstream response ({prefix}{detail})"
        )
