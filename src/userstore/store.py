"""File-backed record store.

Every operation reads the whole file. Mutations (add/remove) re-encode the
whole collection and replace the file. There is no locking, so two processes
writing the same file at once can lose an update.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from .errors import DataError, DuplicateIdError, NotFoundError, StorageError
from .models import User, decode_users, encode_users


class RecordStore:
    """Ordered collection of users persisted as one JSON array."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load(self) -> list[User]:
        """Read the collection, creating an empty file if none exists."""
        try:
            if not self.path.exists():
                self.path.touch()
            text = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise DataError(f"{self.path}: not UTF-8 text") from e
        except OSError as e:
            raise StorageError(f"{self.path}: {e.strerror or e}") from e

        try:
            return decode_users(text)
        except DataError as e:
            raise DataError(f"{self.path}: {e}") from e

    def save(self, users: list[User]) -> None:
        """Replace the file contents with the encoded collection."""
        # Replace the file a symlink points at, keeping its permissions.
        target = self.path.resolve()
        tmp = target.with_name(target.name + ".tmp")
        try:
            tmp.write_text(encode_users(users), encoding="utf-8")
            if target.exists():
                shutil.copymode(target, tmp)
            os.replace(tmp, target)
        except OSError as e:
            tmp.unlink(missing_ok=True)
            raise StorageError(f"{self.path}: {e.strerror or e}") from e

    def list(self) -> str:
        """Return the JSON array of all users, or "" when there are none."""
        users = self.load()
        if not users:
            return ""
        return encode_users(users)

    def add(self, item: str) -> User:
        """Append the user encoded in ``item``; ids must be unique."""
        users = self.load()
        user = User.from_json(item)

        for existing in users:
            if existing.id == user.id:
                raise DuplicateIdError(user.id)

        users.append(user)
        self.save(users)
        return user

    def remove(self, user_id: str) -> int:
        """Remove every user with ``user_id``. Returns how many were removed."""
        users = self.load()
        kept = [u for u in users if u.id != user_id]
        removed = len(users) - len(kept)

        if not removed:
            raise NotFoundError(user_id)

        self.save(kept)
        return removed

    def get(self, user_id: str) -> User:
        for user in self.load():
            if user.id == user_id:
                return user
        raise NotFoundError(user_id)

    def find_by_id(self, user_id: str) -> str:
        """Return the JSON of the first user with ``user_id``."""
        return self.get(user_id).to_json()
