"""
Test suite for lenient query-string parsing and caller identity parsing.

System role: Verification of request normalisation helpers
"""

import uuid

import pytest

from coursehub.boundary.db.models import UserRole
from coursehub.core.exceptions import ForbiddenError, UnauthorizedError
from coursehub.core.identity import Identity, parse_identity, require_admin, require_identity
from coursehub.core.query_params import dollars_to_cents, parse_optional_str, parse_positive_int


class TestParsePositiveInt:
    """Test suite for parse_positive_int()."""

    @pytest.mark.parametrize("raw", [None, "", "abc", "1.5", "0", "-4"])
    def test_bad_input_should_fall_back_to_default(self, raw: str | None) -> None:
        assert parse_positive_int(raw, default=20) == 20

    def test_value_should_be_capped_at_maximum(self) -> None:
        assert parse_positive_int("500", default=20, maximum=100) == 100

    def test_whitespace_should_be_ignored(self) -> None:
        assert parse_positive_int(" 3 ", default=1) == 3

    @pytest.mark.parametrize("raw", ["2147483648", "99999999999999999999", "9" * 5000])
    def test_value_beyond_integer_column_should_fall_back_to_default(self, raw: str) -> None:
        assert parse_positive_int(raw, default=1, maximum=100) == 1

    def test_largest_integer_column_value_should_be_kept(self) -> None:
        assert parse_positive_int("2147483647", default=1) == 2147483647


class TestDollarsToCents:
    """Test suite for dollars_to_cents()."""

    @pytest.mark.parametrize(
        ("raw", "cents"),
        [("10", 1000), ("49.99", 4999), ("0", 0), ("12.345", 1234)],
    )
    def test_amount_should_convert_to_cents(self, raw: str, cents: int) -> None:
        assert dollars_to_cents(raw) == cents

    @pytest.mark.parametrize("raw", [None, "", "   ", "ten", "NaN", "Infinity"])
    def test_bad_amount_should_be_ignored(self, raw: str | None) -> None:
        assert dollars_to_cents(raw) is None

    @pytest.mark.parametrize("raw", ["1e999999999", "1e30", "21474837", "-1e30"])
    def test_amount_beyond_integer_column_should_be_ignored(self, raw: str) -> None:
        assert dollars_to_cents(raw) is None

    def test_largest_amount_fitting_integer_column_should_convert(self) -> None:
        assert dollars_to_cents("21474836.47") == 2147483647


def test_blank_string_parameter_should_become_none() -> None:
    assert parse_optional_str("   ") is None
    assert parse_optional_str(" Beginner ") == "Beginner"


class TestParseIdentity:
    """Test suite for parse_identity() and the role guards."""

    def test_role_should_be_case_insensitive(self) -> None:
        user_id = uuid.uuid4()

        identity = parse_identity(str(user_id), "admin")

        assert identity == Identity(user_id=user_id, role=UserRole.ADMIN)
        assert identity.is_admin

    def test_missing_role_should_default_to_student(self) -> None:
        identity = parse_identity(str(uuid.uuid4()), None)

        assert identity.role == UserRole.STUDENT

    @pytest.mark.parametrize(
        ("user_id", "role"),
        [(None, "ADMIN"), ("", "ADMIN"), ("not-a-uuid", "ADMIN"), (str(uuid.uuid4()), "TEACHER")],
    )
    def test_malformed_headers_should_be_anonymous(self, user_id: str | None, role: str) -> None:
        assert parse_identity(user_id, role) is None

    def test_require_identity_should_reject_anonymous(self) -> None:
        with pytest.raises(UnauthorizedError):
            require_identity(None)

    def test_require_admin_should_reject_students(self) -> None:
        student = Identity(user_id=uuid.uuid4(), role=UserRole.STUDENT)

        with pytest.raises(ForbiddenError):
            require_admin(student)

    def test_require_admin_should_reject_anonymous_as_unauthorized(self) -> None:
        with pytest.raises(UnauthorizedError):
            require_admin(None)
