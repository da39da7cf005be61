# invoicing/services/auth.py

import logging

from invoicing.core.config import Settings
from invoicing.core.errors import (
    EmailTaken,
    InvalidCredentials,
    UserNotFound,
    WeakPassword,
)
from invoicing.core.security import (
    TokenClaims,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from invoicing.models.users import AuthResponse, User
from invoicing.repositories.users import UserRepository

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class AuthService:
    def __init__(self, users: UserRepository, settings: Settings):
        self.users = users
        self.settings = settings

    def register(self, email: str, password: str, name: str) -> AuthResponse:
        if self.users.find_by_email(email) is not None:
            raise EmailTaken()

        if len(password) < MIN_PASSWORD_LENGTH:
            raise WeakPassword()

        password_hash = hash_password(password, rounds=self.settings.bcrypt_rounds)
        user = self.users.create(email, password_hash, name)
        logger.info("Registered user %s", user.id)

        return AuthResponse(token=self._issue_token(user), user=user.public())

    def login(self, email: str, password: str) -> AuthResponse:
        """
        Unknown email and wrong password fail identically so the response
        does not reveal which accounts exist.
        """
        user = self.users.find_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            raise InvalidCredentials()

        return AuthResponse(token=self._issue_token(user), user=user.public())

    def verify(self, token: str) -> TokenClaims:
        return decode_access_token(token, self.settings.jwt_secret)

    def get_user(self, user_id: str) -> User:
        user = self.users.find_by_id(user_id)
        if user is None:
            raise UserNotFound()
        return user.public()

    def _issue_token(self, user: User) -> str:
        return create_access_token(
            user.id,
            user.email,
            secret=self.settings.jwt_secret,
            expires_in=self.settings.token_ttl_seconds,
        )
