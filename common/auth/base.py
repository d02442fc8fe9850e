"""
Abstract authentication provider interface.

Defines the contract that auth providers must implement, so routes and
dependencies only depend on token and password operations, never on a
concrete signing scheme.

Example:
    from common.auth import AuthProvider, JWTAuth

    def get_auth_provider(settings) -> AuthProvider:
        return JWTAuth(secret=settings.JWT_SECRET)
"""

from abc import ABC, abstractmethod
from typing import Dict, Any


class AuthProvider(ABC):
    """
    Abstract authentication provider.

    Token methods are async so implementations backed by remote services
    fit the same interface.
    """

    @abstractmethod
    def hash_password(self, password: str) -> str:
        """
        Hash a plaintext password for storage.

        Args:
            password: The plaintext password

        Returns:
            Encoded password hash
        """
        pass

    @abstractmethod
    def verify_password(self, password: str, hashed: str) -> bool:
        """
        Check a plaintext password against a stored hash.

        Args:
            password: The plaintext password
            hashed: Hash produced by ``hash_password``

        Returns:
            True if the password matches
        """
        pass

    @abstractmethod
    async def create_token(
        self,
        user_id: str,
        **claims: Any,
    ) -> str:
        """
        Create an authentication token for a user.

        Args:
            user_id: The user's ID
            **claims: Additional claims to include in the token

        Returns:
            The authentication token string
        """
        pass

    @abstractmethod
    async def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify an authentication token.

        Args:
            token: The token to verify

        Returns:
            Dictionary containing decoded token claims (at minimum: sub)

        Raises:
            ValueError: If token is invalid or expired
        """
        pass
