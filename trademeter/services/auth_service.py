"""Login and registration business logic."""
import logging

from trademeter.domain.interfaces import BackendService
from trademeter.domain.entities import AuthOutcome, AuthStatus
from trademeter.domain.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

PROFILES_TABLE = "profiles"
SEARCH_PATH = "/search"

PASSWORD_MISMATCH = "Passwords do not match."
PROFILE_SAVE_FAILED = "Account created, but profile save failed."
REGISTERED = "Registration successful! Please check your email to confirm your account."
LOGGED_IN = "Login successful."


class AuthService:
    """Business logic behind the login and register forms."""

    def __init__(self, backend: BackendService):
        self._backend = backend

    def login(self, email: str, password: str) -> AuthOutcome:
        """Sign in; on success direct the user to the search screen."""
        try:
            self._backend.sign_in(email, password)
        except AuthenticationError as e:
            logger.info(f"Login rejected for {email}: {e.message}")
            return AuthOutcome(status=AuthStatus.FAILED, message=e.message)

        logger.info(f"Login succeeded for {email}")
        return AuthOutcome(
            status=AuthStatus.SUCCESS, message=LOGGED_IN, redirect_to=SEARCH_PATH
        )

    def register(
        self,
        first_name: str,
        last_name: str,
        email: str,
        password: str,
        confirm_password: str,
    ) -> AuthOutcome:
        """Create an account, then save its profile row.

        The profile insert is not compensated: if it fails after sign-up
        succeeded, the account exists without a profile and the outcome is
        PARTIAL.
        """
        if password != confirm_password:
            return AuthOutcome(status=AuthStatus.FAILED, message=PASSWORD_MISMATCH)

        try:
            user_id = self._backend.sign_up(email, password)
        except AuthenticationError as e:
            logger.info(f"Sign-up rejected for {email}: {e.message}")
            return AuthOutcome(status=AuthStatus.FAILED, message=e.message)

        if user_id:
            try:
                self._backend.insert(
                    PROFILES_TABLE,
                    [{"id": user_id, "first_name": first_name, "last_name": last_name}],
                )
            except Exception as e:
                logger.error(f"Profile insert failed for user {user_id}: {e}")
                return AuthOutcome(status=AuthStatus.PARTIAL, message=PROFILE_SAVE_FAILED)

        logger.info(f"Registered {email}")
        return AuthOutcome(status=AuthStatus.SUCCESS, message=REGISTERED)
