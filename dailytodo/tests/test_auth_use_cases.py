from __future__ import annotations

import pytest

from dailytodo.application.services.password_hashing import ScryptPasswordHasher
from dailytodo.application.use_cases.users.login_user import LoginUserUseCase
from dailytodo.application.use_cases.users.register_user import RegisterUserUseCase
from dailytodo.domain.users.exceptions import InvalidCredentialsError, UserAlreadyExistsError
from dailytodo.infrastructure.admin_setup import setup_admin_user

from fakes import DeterministicHasher, FakeTokens, InMemoryUserRepository


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


def _register(users: InMemoryUserRepository, admin_username: str | None = None) -> RegisterUserUseCase:
    return RegisterUserUseCase(
        users=users,
        tokens=FakeTokens(),
        password_hasher=DeterministicHasher(),
        admin_username=admin_username,
    )


def _login(users: InMemoryUserRepository) -> LoginUserUseCase:
    return LoginUserUseCase(users=users, tokens=FakeTokens(), password_hasher=DeterministicHasher())


def test_register_user_success(users: InMemoryUserRepository) -> None:
    user, token = _register(users).execute("alice", "secret123", "Alice")

    assert user.username == "alice"
    assert user.name == "Alice"
    assert user.role == "user"
    assert token == "token-1"
    assert users.find_by_username("alice").password_hash == "hashed:secret123"


def test_register_duplicate_username(users: InMemoryUserRepository) -> None:
    _register(users).execute("alice", "secret123")

    with pytest.raises(UserAlreadyExistsError):
        _register(users).execute("alice", "another-pass")


def test_register_admin_username_gets_admin_role(users: InMemoryUserRepository) -> None:
    user, _ = _register(users, admin_username="root").execute("root", "secret123")

    assert user.role == "admin"


def test_login_success_bumps_last_signed_in(users: InMemoryUserRepository) -> None:
    registered, _ = _register(users).execute("alice", "secret123")

    user, token = _login(users).execute("alice", "secret123")

    assert token == f"token-{registered.id}"
    assert user.last_signed_in >= registered.last_signed_in
    assert users.find_by_id(registered.id).last_signed_in == user.last_signed_in


def test_login_wrong_password(users: InMemoryUserRepository) -> None:
    _register(users).execute("alice", "secret123")

    with pytest.raises(InvalidCredentialsError):
        _login(users).execute("alice", "wrong")


def test_login_unknown_user(users: InMemoryUserRepository) -> None:
    with pytest.raises(InvalidCredentialsError):
        _login(users).execute("nobody", "secret123")


class _CountingHasher(DeterministicHasher):
    def __init__(self) -> None:
        self.verified: list[str] = []

    def verify(self, password: str, hashed: str) -> bool:
        self.verified.append(hashed)
        return super().verify(password, hashed)


def test_login_unknown_user_still_checks_a_password(users: InMemoryUserRepository) -> None:
    hasher = _CountingHasher()
    login = LoginUserUseCase(users=users, tokens=FakeTokens(), password_hasher=hasher)

    with pytest.raises(InvalidCredentialsError):
        login.execute("nobody", "secret123")

    assert len(hasher.verified) == 1


def test_unknown_user_pays_scrypt_cost(users: InMemoryUserRepository) -> None:
    calls: list[str] = []

    class _Recording(ScryptPasswordHasher):
        def _derive(self, password: str, salt: str) -> bytes:
            calls.append(salt)
            return super()._derive(password, salt)

    login = LoginUserUseCase(users=users, tokens=FakeTokens(), password_hasher=_Recording())

    with pytest.raises(InvalidCredentialsError):
        login.execute("nobody", "secret123")

    assert len(calls) == 1


def test_admin_setup_promotes_existing_user(users: InMemoryUserRepository) -> None:
    user, _ = _register(users).execute("boss", "secret123")

    assert setup_admin_user(users, "boss") is True
    assert users.find_by_id(user.id).role == "admin"
    assert setup_admin_user(users, "boss") is False


def test_admin_setup_without_user_or_name(users: InMemoryUserRepository) -> None:
    assert setup_admin_user(users, None) is False
    assert setup_admin_user(users, "ghost") is False
