import secrets
import string
from pathlib import Path

import httpx
import pytest


def random_project_ref() -> str:
    return "".join(secrets.choice(string.ascii_lowercase) for _ in range(20))


def random_access_token() -> str:
    return "sbp_" + secrets.token_hex(20)


def mock_response(payload=None, status_code: int = 200, **kwargs) -> httpx.Response:
    if payload is not None:
        kwargs["json"] = payload
    request = httpx.Request("GET", "https://api.supabase.io/v1/projects")
    return httpx.Response(status_code, request=request, **kwargs)


@pytest.fixture
def tmp_project(tmp_path: Path) -> Path:
    project_dir = tmp_path / "test-project"
    project_dir.mkdir()
    return project_dir


@pytest.fixture
def tmp_supalink_global(tmp_path: Path, monkeypatch) -> Path:
    global_dir = tmp_path / "supalink_global"
    global_dir.mkdir()
    monkeypatch.setattr("supalink.config.GLOBAL_CONFIG_DIR", global_dir)
    monkeypatch.setattr("supalink.config.GLOBAL_CONFIG_PATH", global_dir / "config.yaml")
    monkeypatch.setattr("supalink.config.ACCESS_TOKEN_PATH", global_dir / "access-token")
    monkeypatch.setattr("supalink.auth.ACCESS_TOKEN_PATH", global_dir / "access-token")
    monkeypatch.delenv("SUPABASE_ACCESS_TOKEN", raising=False)
    monkeypatch.delenv("SUPABASE_API_URL", raising=False)
    return global_dir


@pytest.fixture
def access_token(tmp_supalink_global, monkeypatch) -> str:
    token = random_access_token()
    monkeypatch.setenv("SUPABASE_ACCESS_TOKEN", token)
    return token


@pytest.fixture
def project_ref() -> str:
    return random_project_ref()
