from __future__ import annotations

import pytest

from equinox.application.services.credentials import (collect_credential_errors,
                                                      validate_credentials)
from equinox.domain.users.entities import Credentials
from equinox.shared.errors import CredentialsValidationError

VALID_PASSWORD = "hunter2hunter2"


@pytest.mark.parametrize(
    ("username", "ok"),
    [
        ("ab", False),
        ("abc", True),
        ("a" * 24, True),
        ("a" * 25, False),
    ],
)
def test_username_length_boundaries(username: str, ok: bool) -> None:
    errors = collect_credential_errors({"username": username, "password": VALID_PASSWORD})

    assert ("username" not in errors) is ok


@pytest.mark.parametrize(("password", "ok"), [("short12", False), ("exactly8", True)])
def test_password_length_boundaries(password: str, ok: bool) -> None:
    errors = collect_credential_errors({"username": "alice", "password": password})

    assert ("password" not in errors) is ok


def test_password_upper_bound() -> None:
    assert "password" not in collect_credential_errors({"username": "alice", "password": "p" * 72})
    errors = collect_credential_errors({"username": "alice", "password": "p" * 73})
    assert errors == {"password": ["Password must be at most 72 characters"]}


def test_pattern_rejection() -> None:
    errors = collect_credential_errors({"username": "bad user!", "password": VALID_PASSWORD})

    assert errors == {"username": ["Username must be alphanumeric or underscore"]}


def test_all_username_violations_are_collected() -> None:
    errors = collect_credential_errors({"username": "x!" * 15, "password": VALID_PASSWORD})

    assert errors["username"] == [
        "Username must be at most 24 characters",
        "Username must be alphanumeric or underscore",
    ]


def test_short_username_with_symbols_reports_both() -> None:
    errors = collect_credential_errors({"username": "a!", "password": VALID_PASSWORD})

    assert errors["username"] == [
        "Username must be at least 3 characters",
        "Username must be alphanumeric or underscore",
    ]


def test_both_fields_are_checked() -> None:
    errors = collect_credential_errors({"username": "ab", "password": "short"})

    assert errors == {
        "username": ["Username must be at least 3 characters"],
        "password": ["Password must be at least 8 characters"],
    }


@pytest.mark.parametrize("raw", [None, [], "alice", 42])
def test_non_mapping_input_requires_both_fields(raw: object) -> None:
    assert collect_credential_errors(raw) == {
        "username": ["Username is required"],
        "password": ["Password is required"],
    }


@pytest.mark.parametrize("username", [None, 123, "", "   "])
def test_missing_username_stops_further_checks(username: object) -> None:
    errors = collect_credential_errors({"username": username, "password": VALID_PASSWORD})

    assert errors == {"username": ["Username is required"]}


@pytest.mark.parametrize("password", [None, 12345678, ""])
def test_missing_password(password: object) -> None:
    errors = collect_credential_errors({"username": "alice", "password": password})

    assert errors == {"password": ["Password is required"]}


def test_validate_trims_username_but_not_password() -> None:
    credentials = validate_credentials({"username": "  alice_01 ", "password": "  spaced pw  "})

    assert credentials == Credentials(username="alice_01", password="  spaced pw  ")


def test_username_with_trailing_newline_is_trimmed_before_pattern() -> None:
    credentials = validate_credentials({"username": "alice\n", "password": VALID_PASSWORD})

    assert credentials.username == "alice"


def test_validate_raises_with_field_map() -> None:
    with pytest.raises(CredentialsValidationError) as exc_info:
        validate_credentials({"username": "ab"})

    assert exc_info.value.errors == {
        "username": ["Username must be at least 3 characters"],
        "password": ["Password is required"],
    }
    assert exc_info.value.to_dict() == {"error": exc_info.value.errors}


def test_credentials_repr_hides_password() -> None:
    credentials = Credentials(username="alice", password=VALID_PASSWORD)

    assert VALID_PASSWORD not in repr(credentials)


@pytest.mark.parametrize("username", ["alice\x1f", "\x1calice", "alice\x85"])
def test_control_separators_are_not_trimmed(username: str) -> None:
    errors = collect_credential_errors({"username": username, "password": VALID_PASSWORD})

    assert errors == {"username": ["Username must be alphanumeric or underscore"]}


def test_unicode_spaces_are_trimmed() -> None:
    credentials = validate_credentials(
        {"username": " \ufeffalice\u3000 ", "password": VALID_PASSWORD}
    )

    assert credentials.username == "alice"
