# Auth service module for login and registration
import logging

from ..errors import DuplicateUserError, InvalidCredentialsError
from ..models import InsertUser
from .credential_service import hash_password, verify_password

logger = logging.getLogger(__name__)


class AuthService:
    """Checks credentials against the store and maps users to and from the
    token kept in their session (the user id)."""

    def __init__(self, storage):
        self.storage = storage
        # Verified against when the username is unknown so both failure paths
        # cost one key derivation.
        self._dummy_hash = hash_password('petsphere-dummy-password')

    def authenticate(self, username, password):
        # Non-string input from a JSON body fails like an unknown user or an
        # empty password, which no stored credential matches.
        user = self.storage.get_user_by_username(username) if isinstance(username, str) else None
        stored = user.password if user is not None else self._dummy_hash
        password_ok = verify_password(password if isinstance(password, str) else '', stored)
        if user is None or not password_ok:
            logger.warning("Failed login attempt")
            raise InvalidCredentialsError()
        logger.info(f"User {user.id} logged in")
        return user

    def serialize_user(self, user):
        return user.id

    def deserialize_user(self, token):
        """Look up the user behind a session token; ``None`` if the token is
        unusable or the user no longer exists."""
        try:
            user_id = int(token)
        except (TypeError, ValueError):
            return None
        return self.storage.get_user(user_id)

    def register(self, data):
        data = data if isinstance(data, InsertUser) else InsertUser.model_validate(data)
        if self.storage.get_user_by_username(data.username) is not None:
            raise DuplicateUserError('username')
        if self.storage.get_user_by_email(data.email) is not None:
            raise DuplicateUserError('email')
        hashed = data.model_copy(update={'password': hash_password(data.password)})
        user = self.storage.create_user(hashed)
        logger.info(f"Registered user {user.id} ({user.username})")
        return user
