"""Invocation configuration for userstore."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

FILE_ENV_VAR = "USERSTORE_FILE"

OPERATIONS = ("list", "add", "remove", "findById")


@dataclass(frozen=True)
class Arguments:
    """Values of the command-line flags for one invocation."""

    operation: str = ""
    file_name: str = ""
    item: str = ""
    id: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, str | None]) -> Arguments:
        """Build Arguments from a mapping keyed by flag name (fileName, not file_name)."""
        return cls(
            operation=data.get("operation") or "",
            file_name=data.get("fileName") or "",
            item=data.get("item") or "",
            id=data.get("id") or "",
        )


def env_file() -> Path:
    """Return the .env file consulted for defaults."""
    return Path.cwd() / ".env"


def load_env() -> bool:
    """Load environment variables from .env if it exists."""
    path = env_file()
    if path.exists():
        return load_dotenv(path)
    return False
