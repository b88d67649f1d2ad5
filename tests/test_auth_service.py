"""Тесты локальных аккаунтов."""
import pytest
from src.services.auth_service import (
    AccountError,
    BlankInputError,
    LocalCredentialStore,
    UsernameTakenError,
    normalize_username,
    user_key,
)
from src.services.preference_store import AUTH_NAMESPACE, InMemoryPreferenceStore


@pytest.fixture
def prefs():
    return InMemoryPreferenceStore()


@pytest.fixture
def store(prefs):
    return LocalCredentialStore(prefs)


def test_normalize_username():
    """Имя обрезается и приводится к нижнему регистру."""
    assert normalize_username("  Alice ") == "alice"
    assert user_key(" Bob") == "user_bob"


def test_create_account_stores_plaintext(store, prefs):
    """Пароль сохраняется под ключом user_<имя>."""
    store.create_account("Alice", "p1")

    assert prefs.get(AUTH_NAMESPACE, "user_alice") == "p1"


@pytest.mark.parametrize("username, password", [("", "x"), ("bob", ""), ("   ", "x"), ("bob", "  ")])
def test_blank_input(store, prefs, username, password):
    """Пустое имя или пароль - ошибка без записи в хранилище."""
    with pytest.raises(BlankInputError) as exc:
        store.create_account(username, password)

    assert exc.value.message == "Please enter a username and password"
    assert not prefs.contains(AUTH_NAMESPACE, user_key(username))


def test_username_taken_case_insensitive(store, prefs):
    """Alice и alice - одно имя; второй аккаунт не создаётся."""
    store.create_account("Alice", "p1")

    with pytest.raises(UsernameTakenError):
        store.create_account("alice", "p2")

    assert prefs.get(AUTH_NAMESPACE, "user_alice") == "p1"


def test_account_errors_share_base(store):
    """Ошибки создания аккаунта ловятся через AccountError."""
    store.create_account("carol", "x")

    with pytest.raises(AccountError):
        store.create_account(" CAROL ", "y")


def test_validate_login(store):
    """Вход без учёта регистра имени, пароль - точное совпадение."""
    store.create_account("bob", "secret")

    assert store.validate_login("BOB", "secret") is True
    assert store.validate_login("  bob ", "secret") is True
    assert store.validate_login("bob", "wrong") is False
    assert store.validate_login("bob", "Secret") is False
    assert store.validate_login("carol", "anything") is False


def test_login_password_compared_exactly(store):
    """Пароль не обрезается и не нормализуется."""
    store.create_account("dave", " pass ")

    assert store.validate_login("dave", " pass ") is True
    assert store.validate_login("dave", "pass") is False
