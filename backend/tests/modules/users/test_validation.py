"""Tests for users validation rules."""

import pytest

from modules.users.models import UpdateUserRequest
from modules.users.validation import (
    is_valid_email,
    validate_create_request,
    validate_update_request,
)
from tests.conftest import make_create_request


def _fields(errors) -> list[str]:
    return [error.field for error in errors]


class TestIsValidEmail:
    @pytest.mark.parametrize("email", [
        "a@x.com",
        "john.doe@company.com",
        "first+tag@sub.domain.org",
    ])
    def test_accepts(self, email):
        assert is_valid_email(email)

    @pytest.mark.parametrize("email", [
        "plain",
        "no-at.example.com",
        "a@b",
        "a b@x.com",
        "a@@x.com",
        "@x.com",
        "a@x.",
        "c@x.com\n",
        "c@x.com ",
        " c@x.com",
    ])
    def test_rejects(self, email):
        assert not is_valid_email(email)


class TestValidateCreateRequest:
    def test_valid_request(self):
        assert validate_create_request(make_create_request()) == []

    def test_missing_everything(self):
        """Every field is reported when the payload is empty."""
        request = make_create_request(
            first_name=None, last_name=None, email=None, role=None, password=None,
        )
        errors = validate_create_request(request)
        assert _fields(errors) == ["firstName", "lastName", "email", "password", "role"]

    def test_whitespace_names_are_blank(self):
        errors = validate_create_request(make_create_request(first_name="  ", last_name="\t"))
        assert _fields(errors) == ["firstName", "lastName"]
        assert errors[0].message == "First name is required"
        assert errors[0].code == "REQUIRED"

    def test_empty_first_name_and_invalid_email_accumulate(self):
        """Two violated rules give two details."""
        errors = validate_create_request(make_create_request(first_name="", email="not-an-email"))
        assert len(errors) == 2
        assert _fields(errors) == ["firstName", "email"]
        assert errors[1].message == "Invalid email format"
        assert errors[1].code == "INVALID_FORMAT"

    @pytest.mark.parametrize("email", ["c@x.com\n", "c@x.com "])
    def test_email_with_trailing_whitespace_rejected(self, email):
        errors = validate_create_request(make_create_request(email=email))
        assert _fields(errors) == ["email"]
        assert errors[0].code == "INVALID_FORMAT"

    def test_blank_email_reports_required_only(self):
        errors = validate_create_request(make_create_request(email="   "))
        assert len(errors) == 1
        assert errors[0].message == "Email is required"

    def test_short_password(self):
        errors = validate_create_request(make_create_request(password="12345"))
        assert len(errors) == 1
        assert errors[0].field == "password"
        assert errors[0].code == "TOO_SHORT"
        assert errors[0].message == "Password must be at least 6 characters"

    def test_six_character_password_is_enough(self):
        assert validate_create_request(make_create_request(password="123456")) == []

    def test_blank_password(self):
        errors = validate_create_request(make_create_request(password="      "))
        assert errors[0].message == "Password is required"

    @pytest.mark.parametrize("role", ["admin", "user", "moderator"])
    def test_allowed_roles(self, role):
        assert validate_create_request(make_create_request(role=role)) == []

    @pytest.mark.parametrize("role", ["root", "ADMIN", ""])
    def test_rejected_roles(self, role):
        errors = validate_create_request(make_create_request(role=role))
        assert _fields(errors) == ["role"]
        assert errors[0].message == "Invalid role"


class TestValidateUpdateRequest:
    def test_empty_update_is_valid(self):
        assert validate_update_request(UpdateUserRequest()) == []

    def test_only_supplied_fields_checked(self):
        assert validate_update_request(UpdateUserRequest(first_name="Zed")) == []

    def test_blank_name_rejected(self):
        errors = validate_update_request(UpdateUserRequest(last_name=" "))
        assert _fields(errors) == ["lastName"]

    def test_invalid_email_rejected(self):
        errors = validate_update_request(UpdateUserRequest(email="broken@"))
        assert errors[0].code == "INVALID_FORMAT"

    def test_invalid_role_and_status_accumulate(self):
        errors = validate_update_request(UpdateUserRequest(role="owner", status="deleted"))
        assert _fields(errors) == ["role", "status"]
        assert errors[1].message == "Invalid status"

    @pytest.mark.parametrize("status", ["active", "inactive", "suspended"])
    def test_allowed_statuses(self, status):
        assert validate_update_request(UpdateUserRequest(status=status)) == []
