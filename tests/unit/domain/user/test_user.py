import pytest

from postboard.domain.common.exceptions import ValidationError
from postboard.domain.common.value_objects import Email, Timestamp, UserId
from postboard.domain.user.entities.user import User
from postboard.domain.user.value_objects import UserRole


def make_user(role: UserRole | None = None) -> User:
    return User.create(
        id=UserId.generate(),
        email=Email.from_string("reader@example.org"),
        password_hash="opaque-hash",
        role=role,
    )


def test_new_user_defaults_to_user_role() -> None:
    user = make_user()

    assert user.role == UserRole.user()
    assert not user.is_admin


def test_promote_to_admin() -> None:
    user = make_user()

    user.promote_to_admin()

    assert user.role == UserRole.admin()
    assert user.is_admin


def test_change_password_replaces_hash_without_inspecting_it() -> None:
    user = make_user()

    user.change_password("")

    assert user.password_hash == ""


def test_create_with_id_restores_all_fields() -> None:
    user_id = UserId.generate()
    created_at = Timestamp.now()

    user = User.create_with_id(
        id=user_id,
        email=Email.from_string("admin@example.org"),
        password_hash="hash",
        role=UserRole.admin(),
        created_at=created_at,
    )

    assert user.id == user_id
    assert user.email.to_string() == "admin@example.org"
    assert user.created_at == created_at
    assert user.is_admin


class TestUserRole:
    def test_canonical_roles(self) -> None:
        assert UserRole.from_string("user").is_user
        assert UserRole.from_string("admin").is_admin

    @pytest.mark.parametrize(
        ("legacy", "canonical"), [("ROLE_USER", "user"), ("ROLE_ADMIN", "admin")]
    )
    def test_legacy_roles_are_normalized(self, legacy: str, canonical: str) -> None:
        assert UserRole.from_string(legacy).to_string() == canonical

    def test_unknown_role_is_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Invalid user role"):
            UserRole.from_string("superuser")
