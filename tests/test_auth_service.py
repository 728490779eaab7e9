"""Tests for login and registration handlers."""
from trademeter.domain.entities import AuthStatus
from trademeter.domain.exceptions import AuthenticationError, BackendQueryError
from trademeter.services.auth_service import AuthService


def register(service, password="secret123", confirm="secret123"):
    return service.register("Ada", "Lovelace", "ada@example.com", password, confirm)


def test_login_success_redirects_to_search(backend):
    outcome = AuthService(backend).login("ada@example.com", "secret123")

    assert outcome.status == AuthStatus.SUCCESS
    assert outcome.redirect_to == "/search"
    assert backend.sign_ins == [("ada@example.com", "secret123")]


def test_login_failure_shows_service_message(backend):
    backend.sign_in_error = AuthenticationError("Invalid login credentials")

    outcome = AuthService(backend).login("ada@example.com", "wrong")

    assert outcome.status == AuthStatus.FAILED
    assert outcome.message == "Invalid login credentials"
    assert outcome.redirect_to is None


def test_register_password_mismatch_never_signs_up(backend):
    outcome = register(AuthService(backend), password="secret123", confirm="secret124")

    assert outcome.status == AuthStatus.FAILED
    assert outcome.message == "Passwords do not match."
    assert backend.sign_ups == []
    assert backend.inserts == []


def test_register_success_saves_profile(backend):
    outcome = register(AuthService(backend))

    assert outcome.status == AuthStatus.SUCCESS
    assert outcome.message.startswith("Registration successful!")
    assert backend.inserts == [
        ("profiles", [{"id": "user-123", "first_name": "Ada", "last_name": "Lovelace"}])
    ]


def test_register_profile_failure_is_qualified_success(backend):
    backend.insert_error = BackendQueryError("duplicate key value")

    outcome = register(AuthService(backend))

    assert outcome.status == AuthStatus.PARTIAL
    assert outcome.message == "Account created, but profile save failed."
    assert len(backend.sign_ups) == 1


def test_register_signup_error_shows_service_message(backend):
    backend.sign_up_error = AuthenticationError("User already registered")

    outcome = register(AuthService(backend))

    assert outcome.status == AuthStatus.FAILED
    assert outcome.message == "User already registered"
    assert backend.inserts == []


def test_register_without_user_id_skips_profile(backend):
    backend.new_user_id = None

    outcome = register(AuthService(backend))

    assert outcome.status == AuthStatus.SUCCESS
    assert backend.inserts == []
