"""Data models for user records."""

from __future__ import annotations

import json
from dataclasses import dataclass

from .errors import DataError
from .validators import validate_collection, validate_user_dict

# Compact encoding, matching what other tools reading the file expect.
_SEPARATORS = (",", ":")


@dataclass
class User:
    """A single user record."""

    id: str
    email: str = ""
    age: int = 0

    @classmethod
    def from_dict(cls, data: dict) -> User:
        """Create a User from a decoded JSON object.

        Raises DataError if the object does not describe a user.
        """
        errors = validate_user_dict(data)
        if errors:
            raise DataError("; ".join(errors))
        return cls(
            id=data["id"],
            email=data.get("email", ""),
            age=data.get("age", 0),
        )

    @classmethod
    def from_json(cls, text: str) -> User:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise DataError(f"invalid item JSON: {e}") from e
        return cls.from_dict(data)

    def to_dict(self) -> dict:
        """Convert User to a dictionary with keys in id, email, age order."""
        return {
            "id": self.id,
            "email": self.email,
            "age": self.age,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=_SEPARATORS, ensure_ascii=False)


def decode_users(text: str) -> list[User]:
    """Decode the contents of a store file.

    Empty or whitespace-only text, or a JSON null, is the empty collection.
    """
    if not text.strip():
        return []

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DataError(f"invalid JSON: {e}") from e

    if data is None:
        return []

    errors = validate_collection(data)
    if errors:
        raise DataError("; ".join(errors))

    return [User.from_dict(item) for item in data]


def encode_users(users: list[User]) -> str:
    """Encode a collection as a compact JSON array."""
    return json.dumps(
        [user.to_dict() for user in users],
        separators=_SEPARATORS,
        ensure_ascii=False,
    )
