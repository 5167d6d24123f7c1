from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

OUTPUT_FORMATS = ("text", "json")


def repo_root() -> Path:
    # Project root is the directory that contains the `perlver/` package.
    return Path(__file__).resolve().parents[1]


def load_env() -> None:
    # Prefer a project-local `.env`; fall back to searching from CWD.
    root_env = repo_root() / ".env"
    env_path = str(root_env) if root_env.exists() else (find_dotenv(usecwd=True) or str(root_env))
    load_dotenv(env_path)


@dataclass(frozen=True)
class Settings:
    log_level: str
    output: str


def load_settings() -> Settings:
    load_env()
    output = (os.getenv("PERLVER_OUTPUT") or "text").strip().lower()
    if output not in OUTPUT_FORMATS:
        raise ValueError(f"PERLVER_OUTPUT must be one of {', '.join(OUTPUT_FORMATS)}: {output}")
    return Settings(
        log_level=(os.getenv("PERLVER_LOG_LEVEL") or "WARNING").strip().upper(),
        output=output,
    )
