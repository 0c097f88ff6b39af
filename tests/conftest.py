import sys
import json
from io import BytesIO
from pathlib import Path
from typing import Any, Callable
from urllib.error import HTTPError

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()

ESLINT_URL = "https://api.github.com/repos/eslint/eslint/contents/lib/rules"
TSLINT_URL = "https://api.github.com/repos/palantir/tslint/contents/src/rules"


@pytest.fixture
def github_urls() -> dict[str, str]:
    return {"eslint": ESLINT_URL, "tslint": TSLINT_URL}


class FakeResponse:
    def __init__(self, payload: str) -> None:
        self._payload = payload

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return None

    def read(self) -> bytes:
        return self._payload.encode("utf-8")


@pytest.fixture
def listing() -> Callable[..., list[dict[str, str]]]:
    def _listing(*names: str) -> list[dict[str, str]]:
        return [{"name": name, "type": "file"} for name in names]

    return _listing


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setattr(Path, "home", lambda: tmp_path)


@pytest.fixture
def write_json():
    def _write(path: Path, payload: Any) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload), encoding="utf-8")

    return _write


@pytest.fixture
def config_root(tmp_path: Path) -> Path:
    return tmp_path / ".config" / "lint-rule-sync"


@pytest.fixture
def rule_catalog_files(config_root: Path, write_json) -> Path:
    config_dir = config_root / "config"
    write_json(
        config_dir / "tslint-rules.json",
        {"noConsole": {"category": "style"}, "curly": {}, "retired": {}},
    )
    write_json(
        config_dir / "eslint-rules.json",
        {"noExtraSemi": {}, "validJsdoc": {}, "noCommaDangle": {}},
    )
    write_json(config_dir / "unused-tslint-rules.json", ["no-unused-variable"])
    return config_root


@pytest.fixture
def fake_github(monkeypatch) -> Callable[[dict[str, Any]], list[str]]:
    """Route urlopen calls by URL. Values may be payloads, raw strings or exceptions."""

    def _install(routes: dict[str, Any]) -> list[str]:
        requested: list[str] = []

        def _urlopen(request, timeout=None):
            url = request.full_url
            requested.append(url)
            route = routes[url]
            if isinstance(route, BaseException):
                raise route
            if isinstance(route, str):
                return FakeResponse(route)
            return FakeResponse(json.dumps(route))

        monkeypatch.setattr("lint_rule_sync.upstream.client.urlopen", _urlopen)
        return requested

    return _install


@pytest.fixture
def http_error() -> Callable[..., HTTPError]:
    def _error(url: str, code: int, payload: dict[str, Any]) -> HTTPError:
        body = BytesIO(json.dumps(payload).encode("utf-8"))
        return HTTPError(url, code, "Forbidden", {}, body)  # type: ignore[arg-type]

    return _error


@pytest.fixture
def cli_runner(tmp_path: Path) -> CliRunner:
    class HomeCliRunner(CliRunner):
        def invoke(self, cli: Any, args: Any = None, **kwargs: Any):  # type: ignore[override]
            env = dict(kwargs.pop("env", {}) or {})
            env.setdefault("HOME", str(tmp_path))
            kwargs["env"] = env
            return super().invoke(cli, args=args, **kwargs)

    return HomeCliRunner()
