"""
Registration, sign-in and bearer tokens.

Passwords: PBKDF2-HMAC-SHA256, stored as
    pbkdf2_sha256$<iterations>$<salt hex>$<hash hex>
Tokens: HS256 JWT carrying the user id as ``id``.
"""

from __future__ import annotations

import hashlib
import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from paperpilot.database.user_repository import UserRepository
from paperpilot.errors import AuthError, ValidationError

logger = logging.getLogger(__name__)

HASH_ALGORITHM = "pbkdf2_sha256"
HASH_ITERATIONS = 240_000
MIN_PASSWORD_LENGTH = 6


def hash_password(password: str, iterations: int = HASH_ITERATIONS) -> str:
    salt = secrets.token_bytes(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
    return f"{HASH_ALGORITHM}${iterations}${salt.hex()}${digest.hex()}"


def verify_password(password: str, stored: str) -> bool:
    try:
        algorithm, iterations, salt_hex, digest_hex = stored.split("$")
        if algorithm != HASH_ALGORITHM:
            return False
        digest = hashlib.pbkdf2_hmac(
            "sha256",
            password.encode("utf-8"),
            bytes.fromhex(salt_hex),
            int(iterations),
        )
    except (ValueError, AttributeError):
        return False
    return secrets.compare_digest(digest.hex(), digest_hex)


class TokenService:
    def __init__(self, secret: str, algorithm: str = "HS256", expire_minutes: int = 60 * 24 * 7):
        self.secret = secret
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def issue(self, user_id: str) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "id": user_id,
            "iat": now,
            "exp": now + timedelta(minutes=self.expire_minutes),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> str:
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError:
            logger.info("🔒 Expired token rejected")
            raise AuthError("Invalid token")
        except jwt.InvalidTokenError:
            raise AuthError("Invalid token")

        user_id = payload.get("id")
        if not user_id or not isinstance(user_id, str):
            raise AuthError("Invalid token")
        return user_id


class AuthService:
    def __init__(self, users: UserRepository, tokens: TokenService):
        self.users = users
        self.tokens = tokens

    @staticmethod
    def _normalize_email(email: Optional[str]) -> str:
        return (email or "").strip().lower()

    def register(
        self,
        email: Optional[str],
        password: Optional[str],
        name: Optional[str] = None,
        expertise: Optional[str] = None,
    ) -> str:
        email = self._normalize_email(email)
        if not email or "@" not in email:
            raise ValidationError("A valid email is required")
        if not password or len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )

        user = self.users.create(
            email=email,
            password_hash=hash_password(password),
            name=name,
            expertise=expertise,
        )
        return self.tokens.issue(user.id)

    def signin(self, email: Optional[str], password: Optional[str]) -> str:
        email = self._normalize_email(email)
        if not email or not password:
            raise AuthError("Invalid credentials")

        user = self.users.get_by_email(email)
        if not user or not verify_password(password, user.password_hash):
            logger.info(f"🔒 Failed sign-in for {email}")
            raise AuthError("Invalid credentials")

        return self.tokens.issue(user.id)
