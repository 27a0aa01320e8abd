from userstore.validators import (
    validate_age,
    validate_collection,
    validate_user_dict,
    validate_user_id,
)


def test_valid_user_has_no_errors():
    assert validate_user_dict({"id": "1", "email": "a@b.com", "age": 30}) == []


def test_user_id_must_be_non_empty_string():
    assert validate_user_id("") == ["id cannot be empty"]
    assert validate_user_id(3) == ["id must be a string, got int"]


def test_age_rejects_bool_and_float():
    assert validate_age(True)
    assert validate_age(1.5)
    assert validate_age(0) == []


def test_user_dict_collects_every_error():
    errors = validate_user_dict({"id": 1, "email": None, "age": "x"})
    assert len(errors) == 3


def test_user_dict_requires_object():
    assert validate_user_dict(["id"]) == ["record must be a JSON object, got list"]


def test_collection_prefixes_record_index():
    assert validate_collection([{"id": "1"}, {}]) == ["record 1: id is required"]
