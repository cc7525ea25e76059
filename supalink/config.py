from __future__ import annotations

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from supalink.utils.files import read_yaml

GLOBAL_CONFIG_DIR = Path.home() / ".supalink"
GLOBAL_CONFIG_PATH = GLOBAL_CONFIG_DIR / "config.yaml"
ACCESS_TOKEN_PATH = GLOBAL_CONFIG_DIR / "access-token"

# Relative to the workspace root
PROJECT_REF_PATH = Path("supabase") / ".temp" / "project-ref"

ACCESS_TOKEN_ENV = "SUPABASE_ACCESS_TOKEN"
API_URL_ENV = "SUPABASE_API_URL"


class ApiConfig(BaseModel):
    url: str = "https://api.supabase.io"
    timeout: float = 10


class SupalinkConfig(BaseModel):
    version: str = "1.0"
    api: ApiConfig = Field(default_factory=ApiConfig)


def load_global_config() -> SupalinkConfig:
    try:
        data = read_yaml(GLOBAL_CONFIG_PATH)
    except yaml.YAMLError as exc:
        raise ValueError(f"Failed to parse config file {GLOBAL_CONFIG_PATH}: {exc}") from exc
    cfg = SupalinkConfig.model_validate(data) if data else SupalinkConfig()
    override = os.environ.get(API_URL_ENV)
    if override:
        cfg.api.url = override
    return cfg


def project_ref_file(project_dir: Path) -> Path:
    return project_dir / PROJECT_REF_PATH
