from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional

from supalink.api.client import ApiClient
from supalink.auth import load_access_token
from supalink.config import project_ref_file
from supalink.utils.files import write_text_file

log = logging.getLogger("supalink.project")

_PROJECT_REF_PATTERN = re.compile(r"^[a-z]{20}$")


def validate_project_ref(project_ref: str) -> str:
    if not _PROJECT_REF_PATTERN.match(project_ref):
        raise ValueError(
            "Invalid project ref format. Must be like `abcdefghijklmnopqrst`."
        )
    return project_ref


def link_project(
    project_ref: str,
    project_dir: Optional[Path] = None,
    client: Optional[ApiClient] = None,
) -> Path:
    """Link ``project_dir`` to the hosted project ``project_ref``.

    The reference is checked, credentials are loaded and the project's
    functions endpoint is queried once. Only after a successful response is
    the reference written to ``supabase/.temp/project-ref``. Any failure
    propagates and nothing is written.
    """
    validate_project_ref(project_ref)
    if client is None:
        client = ApiClient(load_access_token())
    project_dir = project_dir or Path.cwd()

    functions = client.list_functions(project_ref)
    log.info("project %s reachable (%d functions)", project_ref, len(functions))

    return write_text_file(project_ref_file(project_dir), project_ref)


def load_project_ref(project_dir: Optional[Path] = None) -> str:
    path = project_ref_file(project_dir or Path.cwd())
    if not path.exists():
        raise RuntimeError("Cannot find project ref. Have you run: supalink link")
    return validate_project_ref(path.read_text(encoding="utf-8").strip())


def unlink_project(project_dir: Optional[Path] = None) -> bool:
    path = project_ref_file(project_dir or Path.cwd())
    if not path.exists():
        return False
    path.unlink()
    log.info("removed %s", path)
    return True
