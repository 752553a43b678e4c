"""Domain Types: WriteResult outcome semantics."""

from uuid import uuid4

from user_api.core.domain_types import FieldError, UserRecord, WriteResult


def test_success_is_ok_and_carries_user():
    user = UserRecord(id=uuid4(), name="Ana", email="ana@example.com", password="x")
    result = WriteResult.success(user)
    assert result.ok
    assert result.user is user
    assert result.errors == []


def test_failure_is_not_ok_and_has_no_user():
    errors = [FieldError("name", "Name is required.")]
    result = WriteResult.failure(errors)
    assert not result.ok
    assert result.user is None
    assert result.errors == errors


def test_failure_copies_error_list():
    errors = [FieldError("name", "Name is required.")]
    result = WriteResult.failure(errors)
    errors.clear()
    assert len(result.errors) == 1


def test_user_record_id_defaults_to_none():
    assert UserRecord(name="a", email="b", password="c").id is None
