"""Validation functions for user records."""

from __future__ import annotations

from typing import Any


def validate_user_id(user_id: Any) -> list[str]:
    """Validate a record id.

    Rules:
    - Must be a string
    - Cannot be empty
    """
    errors = []
    if not isinstance(user_id, str):
        errors.append(f"id must be a string, got {type(user_id).__name__}")
        return errors

    if not user_id:
        errors.append("id cannot be empty")

    return errors


def validate_email(email: Any) -> list[str]:
    errors = []
    if not isinstance(email, str):
        errors.append(f"email must be a string, got {type(email).__name__}")
    return errors


def validate_age(age: Any) -> list[str]:
    """Validate an age value. Booleans are rejected even though they are ints."""
    errors = []
    if isinstance(age, bool) or not isinstance(age, int):
        errors.append(f"age must be an integer, got {type(age).__name__}")
    return errors


def validate_user_dict(data: Any) -> list[str]:
    """Validate a decoded JSON value as a user record.

    Missing email and age are allowed; unknown keys are ignored.
    """
    errors = []

    if not isinstance(data, dict):
        errors.append(f"record must be a JSON object, got {type(data).__name__}")
        return errors

    if "id" not in data:
        errors.append("id is required")
    else:
        errors.extend(validate_user_id(data["id"]))

    if "email" in data:
        errors.extend(validate_email(data["email"]))

    if "age" in data:
        errors.extend(validate_age(data["age"]))

    return errors


def validate_collection(data: Any) -> list[str]:
    """Validate a decoded JSON value as a collection of user records."""
    errors = []

    if not isinstance(data, list):
        errors.append(f"collection must be a JSON array, got {type(data).__name__}")
        return errors

    for i, item in enumerate(data):
        for err in validate_user_dict(item):
            errors.append(f"record {i}: {err}")

    return errors
