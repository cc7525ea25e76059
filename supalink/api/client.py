from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from supalink.config import load_global_config

log = logging.getLogger("supalink.api")


@dataclass
class Function:
    id: str
    slug: str
    name: str
    status: str = ""
    version: int = 0


@dataclass
class Project:
    id: str
    name: str
    organization_id: str = ""
    region: str = ""
    created_at: str = ""


def _error_message(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text.strip()
    if isinstance(body, dict):
        return str(body.get("message", ""))
    return ""


def _json_body(resp: httpx.Response, path: str):
    if resp.status_code == 204 or not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        log.debug("ignoring non-JSON body from %s", path)
        return None


def _items(data, key: str) -> list[dict]:
    if isinstance(data, dict):
        data = data.get(key)
    if not isinstance(data, list):
        return []
    return [item for item in data if isinstance(item, dict)]


def _to_function(data: dict) -> Function:
    slug = data.get("slug", "")
    return Function(
        id=data.get("id", ""), slug=slug, name=data.get("name") or slug,
        status=data.get("status", ""), version=data.get("version", 0),
    )


def _to_project(data: dict) -> Project:
    return Project(
        id=data.get("id", ""), name=data.get("name", ""),
        organization_id=data.get("organization_id", ""),
        region=data.get("region", ""), created_at=data.get("created_at", ""),
    )


class ApiClient:
    """Thin client for the hosted management API. One attempt per request."""

    def __init__(self, token: str, base_url: Optional[str] = None,
                 timeout: Optional[float] = None) -> None:
        if base_url is None or timeout is None:
            api = load_global_config().api
            base_url = base_url or api.url
            timeout = timeout if timeout is not None else api.timeout
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._token = token

    def _request(self, method: str, path: str, **kwargs):
        url = f"{self.base_url}{path}"
        headers = {"Authorization": f"Bearer {self._token}"}
        log.debug("%s %s", method, url)
        try:
            resp = httpx.request(method, url, headers=headers, timeout=self.timeout, **kwargs)
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            detail = _error_message(exc.response)
            raise RuntimeError(
                f"Unexpected error from {path}: {status}" + (f" {detail}" if detail else "")
            ) from exc
        except httpx.HTTPError as exc:
            raise RuntimeError(f"Request to {path} failed: {exc}") from exc
        return _json_body(resp, path)

    def list_functions(self, project_ref: str) -> list[Function]:
        data = self._request("GET", f"/v1/projects/{project_ref}/functions")
        return [_to_function(f) for f in _items(data, "functions")]

    def list_projects(self) -> list[Project]:
        data = self._request("GET", "/v1/projects")
        return [_to_project(p) for p in _items(data, "projects")]
