from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

TOKEN_ENV_VAR = "GHCR_TOKEN"


@dataclass
class AuditConfig:
    owner: str
    repo: str
    project_root: Path
    token: Optional[str] = None

    @classmethod
    def from_args(cls, args) -> "AuditConfig":
        return cls(
            owner=args.owner,
            repo=args.repo,
            project_root=Path(args.dir).resolve(),
            token=args.token,
        )


def load_env_file() -> bool:
    """Load ./.env into os.environ; variables already set are kept."""
    return load_dotenv(Path.cwd() / ".env")


def resolve_token(flag_value: Optional[str], environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    if flag_value:
        return flag_value
    env = os.environ if environ is None else environ
    return env.get(TOKEN_ENV_VAR) or None
