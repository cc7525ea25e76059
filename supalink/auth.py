from __future__ import annotations

import logging
import os
import re

from supalink.config import ACCESS_TOKEN_ENV, ACCESS_TOKEN_PATH
from supalink.utils.files import write_text_file

log = logging.getLogger("supalink.auth")

_TOKEN_PATTERN = re.compile(r"^sbp_[a-f0-9]{40}$")


def validate_access_token(token: str) -> str:
    if not _TOKEN_PATTERN.match(token):
        raise ValueError(
            "Invalid access token format. Must be like `sbp_0102...1920`."
        )
    return token


def load_access_token() -> str:
    """Return the access token, preferring the environment over the token file."""
    token = os.environ.get(ACCESS_TOKEN_ENV, "").strip()
    if token:
        log.debug("using access token from $%s", ACCESS_TOKEN_ENV)
        return validate_access_token(token)
    if ACCESS_TOKEN_PATH.exists():
        log.debug("using access token from %s", ACCESS_TOKEN_PATH)
        return validate_access_token(ACCESS_TOKEN_PATH.read_text(encoding="utf-8").strip())
    raise RuntimeError(
        f"Access token not provided. Set {ACCESS_TOKEN_ENV} or run: supalink login"
    )


def save_access_token(token: str) -> None:
    validate_access_token(token)
    write_text_file(ACCESS_TOKEN_PATH, token, mode=0o600)


def delete_access_token() -> bool:
    if not ACCESS_TOKEN_PATH.exists():
        return False
    ACCESS_TOKEN_PATH.unlink()
    return True
