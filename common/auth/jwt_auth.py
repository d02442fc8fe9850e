"""
JWT + bcrypt authentication provider.

A stateless authentication implementation using:
- JWT tokens signed with a shared secret
- bcrypt for password hashing, with SHA-256 pre-hashing

Example:
    auth = JWTAuth(
        secret="your-secret-key",
        access_token_expire_minutes=60,
    )

    password_hash = auth.hash_password("password123")
    token = await auth.create_token("42", role="user", email="user@example.com")

    # Verify token
    claims = await auth.verify_token(token)
    print(claims["sub"])  # "42"
"""

import base64
import hashlib
from datetime import datetime, timedelta, timezone
from typing import Dict, Any

import bcrypt as bcrypt_lib
from jose import jwt, JWTError

from common.auth.base import AuthProvider


class JWTAuth(AuthProvider):
    """
    JWT + bcrypt authentication provider.

    User storage is not handled here; services look users up and call
    ``verify_password`` / ``create_token`` themselves.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        access_token_expire_minutes: int = 30,
        bcrypt_rounds: int = 12,
    ):
        """
        Initialize JWT auth provider.

        Args:
            secret: Secret key for JWT signing (keep this secure!)
            algorithm: JWT algorithm (default: HS256)
            access_token_expire_minutes: Token expiration time
            bcrypt_rounds: bcrypt cost factor
        """
        if not secret:
            raise ValueError("JWT secret must not be empty")

        self.secret = secret
        self.algorithm = algorithm
        self.access_token_expire = timedelta(minutes=access_token_expire_minutes)
        self.bcrypt_rounds = bcrypt_rounds

    def _prehash_password(self, password: str) -> str:
        """
        Pre-hash password with SHA-256 before bcrypt.

        This handles bcrypt's 72-byte limit and ensures consistent
        behavior across all password lengths.
        """
        sha256_hash = hashlib.sha256(password.encode("utf-8")).digest()
        return base64.b64encode(sha256_hash).decode("utf-8")

    def hash_password(self, password: str) -> str:
        """Hash a password using bcrypt with SHA-256 pre-hashing."""
        prehashed = self._prehash_password(password)
        salt = bcrypt_lib.gensalt(rounds=self.bcrypt_rounds)
        return bcrypt_lib.hashpw(prehashed.encode("utf-8"), salt).decode("utf-8")

    def verify_password(self, password: str, hashed: str) -> bool:
        """
        Verify a password against its hash.

        Malformed hashes never match.
        """
        if not hashed:
            return False

        prehashed = self._prehash_password(password)
        try:
            return bcrypt_lib.checkpw(prehashed.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError:
            return False

    async def create_token(
        self,
        user_id: str,
        **claims: Any,
    ) -> str:
        """Create a JWT token for the user."""
        now = datetime.now(timezone.utc)
        payload = {
            **claims,
            "sub": str(user_id),
            "exp": now + self.access_token_expire,
            "iat": now,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    async def verify_token(self, token: str) -> Dict[str, Any]:
        """Verify and decode a JWT token."""
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
            )
        except JWTError as e:
            raise ValueError(f"Invalid token: {e}")

        if not payload.get("sub"):
            raise ValueError("Invalid token: missing subject")
        return payload
