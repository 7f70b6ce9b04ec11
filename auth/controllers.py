# backend/auth/controllers.py
import logging

import jwt

from repositories.user_repository import UserRepository
from shared.exceptions import (
    AppError, DuplicateCredential, InvalidCredential, NotFound, ServiceError, ValidationError,
)
from .models import UserRegister, UserLogin, AuthResponse
from .utils import hash_password, verify_password, create_access_token, decode_access_token

LOG = logging.getLogger("auth.controllers")


class CredentialService:
    """Owns user records and issues signed identity tokens.

    Every token carries ``id``, ``username`` and ``email`` plus ``iat`` and an
    ``exp`` of ``TOKEN_TTL_HOURS`` after issue, for both register and login.
    Any fault from the store that is not already an ``AppError`` is reported
    as ``ServiceError``.
    """

    def __init__(self, users: UserRepository, settings):
        self.users = users
        self.secret = settings.JWT_SECRET
        self.rounds = settings.SALT
        self.ttl_hours = settings.TOKEN_TTL_HOURS

    # =====================================================
    # 🔹 Register
    # =====================================================
    def register(self, data: UserRegister) -> AuthResponse:
        LOG.info(f"🧩 Registration attempt: {data.email}")
        try:
            if self.users.get_by_email(data.email):
                LOG.warning(f"⚠️ Email already registered: {data.email}")
                raise DuplicateCredential()

            try:
                hashed = hash_password(data.password, self.rounds)
            except ValueError:
                raise ValidationError("Password must be at most 72 bytes", body_key="msg")

            user = self.users.create(data.username, data.email, hashed)
            return self._issue(user.id, user.username, user.email)
        except AppError:
            raise
        except Exception:
            LOG.exception("❌ Registration error")
            raise ServiceError()

    # =====================================================
    # 🔹 Login
    # =====================================================
    def login(self, data: UserLogin) -> AuthResponse:
        LOG.info(f"🔐 Login attempt: {data.email}")
        try:
            user = self.users.get_by_email(data.email)
            if not user:
                raise NotFound()
            if not verify_password(data.password, user.password):
                LOG.warning(f"⚠️ Wrong password for {data.email}")
                raise InvalidCredential()
            return self._issue(user.id, user.username, user.email)
        except AppError:
            raise
        except Exception:
            LOG.exception("❌ Login error")
            raise ServiceError()

    # =====================================================
    # 🔹 Validate token
    # =====================================================
    def verify_token(self, token: str) -> dict:
        if not self.secret:
            LOG.error("❌ JWT_SECRET is not configured")
            raise ServiceError()
        try:
            return decode_access_token(token, self.secret)
        except jwt.ExpiredSignatureError:
            raise InvalidCredential("Token expired")
        except jwt.InvalidTokenError:
            raise InvalidCredential("Invalid token")

    def _issue(self, user_id: str, username: str, email: str) -> AuthResponse:
        if not self.secret:
            LOG.error("❌ JWT_SECRET is not configured")
            raise ServiceError()
        token = create_access_token(
            {"id": user_id, "username": username, "email": email},
            self.secret,
            expires_hours=self.ttl_hours,
        )
        return AuthResponse(token=token, username=username, email=email)
