import json
import logging
from http.client import HTTPException
from typing import Any
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from lint_rule_sync.constants import (
    DEFAULT_TIMEOUT_SECONDS,
    GITHUB_API_HOST,
    USER_AGENT,
)
from lint_rule_sync.errors import NetworkError, UpstreamFormatError, UpstreamShapeError
from lint_rule_sync.models import RuleDescriptor
from lint_rule_sync.upstream.schema import listing_error

logger = logging.getLogger(__name__)


class GitHubContentsClient:
    """Reads directory listings from the GitHub contents API.

    Every call completes: it either returns the parsed listing or raises an
    ``UpstreamError`` subclass describing what went wrong.
    """

    def __init__(
        self,
        *,
        host: str = GITHUB_API_HOST,
        user_agent: str = USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self.host = host
        self.user_agent = user_agent
        self.timeout = timeout

    def url_for(self, path: str) -> str:
        return f"https://{self.host}{path}"

    def fetch(self, path: str) -> list[RuleDescriptor]:
        url = self.url_for(path)
        payload = self._get_json(url)
        detail = listing_error(payload)
        if detail is not None:
            raise UpstreamShapeError(url, detail)
        descriptors = [RuleDescriptor(name=item["name"]) for item in payload]
        logger.debug("fetched %d entries from %s", len(descriptors), url)
        return descriptors

    def _get_json(self, url: str) -> Any:
        request = Request(
            url,
            headers={
                "User-Agent": self.user_agent,
                "Accept": "application/vnd.github+json",
            },
        )
        logger.debug("GET %s", url)
        try:
            with urlopen(request, timeout=self.timeout) as response:
                raw = response.read()
        except HTTPError as exc:
            raise UpstreamShapeError(
                url, _http_error_detail(exc), status=exc.code
            ) from exc
        except URLError as exc:
            raise NetworkError(url, str(exc.reason)) from exc
        except HTTPException as exc:
            raise NetworkError(url, str(exc) or type(exc).__name__) from exc
        except OSError as exc:
            raise NetworkError(url, str(exc)) from exc

        try:
            return json.loads(raw.decode("utf-8"))
        except ValueError as exc:
            raise UpstreamFormatError(url, str(exc)) from exc


def _http_error_detail(exc: HTTPError) -> str:
    try:
        payload = json.loads(exc.read().decode("utf-8"))
    except (OSError, ValueError, AttributeError):
        return str(exc.reason)
    if isinstance(payload, dict) and isinstance(payload.get("message"), str):
        return payload["message"]
    return str(exc.reason)
