"""Unit tests for identity value objects."""

from pydantic import ValidationError
import pytest

from booknet.domain.value import AccountStatus, RoleName


class TestRoleName:
    """Tests for RoleName."""

    def test_valid_role_name(self):
        assert RoleName("ADMIN").root == "ADMIN"
        assert str(RoleName("USER")) == "USER"

    @pytest.mark.parametrize("value", ["", "   "])
    def test_blank_role_name_rejected(self, value):
        with pytest.raises(ValidationError):
            RoleName(value)

    def test_long_role_name_rejected(self):
        with pytest.raises(ValidationError):
            RoleName("R" * 101)

    def test_role_names_compare_by_value(self):
        assert RoleName("USER") == RoleName("USER")
        assert RoleName("USER") != RoleName("ADMIN")


class TestAccountStatusFromFlags:
    """Tests for AccountStatus.from_flags()."""

    def test_only_enabled_and_unlocked_is_active(self):
        assert AccountStatus.from_flags(True, False) == AccountStatus.ACTIVE
        assert AccountStatus.from_flags(True, True) == AccountStatus.LOCKED
        assert AccountStatus.from_flags(False, False) == AccountStatus.DISABLED
        assert (
            AccountStatus.from_flags(False, True)
            == AccountStatus.DISABLED_AND_LOCKED
        )
