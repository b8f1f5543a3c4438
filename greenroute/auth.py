"""User registration and login with hashed credentials."""

import base64
import hashlib
import hmac
import logging
import os
from abc import ABC, abstractmethod
from typing import Dict, Optional

from .exceptions import AuthenticationError, ValidationError
from .interfaces import User

logger = logging.getLogger(__name__)


class PasswordHasher(ABC):
    """Contract for one-way password hashing."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return an encoded hash that embeds everything needed to verify."""
        raise NotImplementedError

    @abstractmethod
    def verify(self, password: str, encoded: str) -> bool:
        raise NotImplementedError


class PBKDF2Hasher(PasswordHasher):
    """PBKDF2-HMAC-SHA256, encoded as ``pbkdf2_sha256$iterations$salt$hash``."""

    algorithm = 'pbkdf2_sha256'

    def __init__(self, iterations: int = 260000, salt_bytes: int = 16):
        self.iterations = iterations
        self.salt_bytes = salt_bytes

    def _derive(self, password: str, salt: bytes, iterations: int) -> bytes:
        return hashlib.pbkdf2_hmac('sha256', password.encode('utf-8'), salt, iterations)

    def hash(self, password: str) -> str:
        salt = os.urandom(self.salt_bytes)
        digest = self._derive(password, salt, self.iterations)
        return '$'.join([
            self.algorithm,
            str(self.iterations),
            base64.b64encode(salt).decode('ascii'),
            base64.b64encode(digest).decode('ascii'),
        ])

    def verify(self, password: str, encoded: str) -> bool:
        try:
            algorithm, iterations, salt, digest = encoded.split('$')
            iterations = int(iterations)
            salt = base64.b64decode(salt)
            expected = base64.b64decode(digest)
        except ValueError:
            logger.warning("Stored password hash is malformed")
            return False
        if algorithm != self.algorithm:
            return False
        return hmac.compare_digest(self._derive(password, salt, iterations), expected)


class UserRepository(ABC):
    """Storage interface for registered users."""

    @abstractmethod
    def get(self, email: str) -> Optional[User]:
        raise NotImplementedError

    @abstractmethod
    def add(self, user: User) -> None:
        raise NotImplementedError


class InMemoryUserRepository(UserRepository):
    """Keeps users in a dict keyed by normalized email."""

    def __init__(self):
        self._users: Dict[str, User] = {}

    def get(self, email: str) -> Optional[User]:
        return self._users.get(email)

    def add(self, user: User) -> None:
        self._users[user.email] = user

    def __len__(self) -> int:
        return len(self._users)


class AuthService:
    """Registers users and tracks the signed-in session."""

    def __init__(self, repository: UserRepository, hasher: Optional[PasswordHasher] = None):
        self.repository = repository
        self.hasher = hasher or PBKDF2Hasher()
        self.current_user: Optional[User] = None

    @staticmethod
    def _normalize_email(email: str) -> str:
        if not isinstance(email, str) or not email.strip():
            raise ValidationError('email', email, "Email is required")
        email = email.strip().lower()
        if '@' not in email:
            raise ValidationError('email', email, "Email address is not valid")
        return email

    @staticmethod
    def _check_password(password: str) -> None:
        if not isinstance(password, str) or not password:
            raise ValidationError('password', None, "Password is required")

    def register(self, email: str, password: str, company_name: str = "") -> User:
        """Create a user and sign them in."""
        email = self._normalize_email(email)
        self._check_password(password)

        if self.repository.get(email) is not None:
            raise AuthenticationError("Email already registered")

        user = User(email=email, password_hash=self.hasher.hash(password), company_name=company_name)
        self.repository.add(user)
        self.current_user = user
        logger.info(f"Registered user {email}")
        return user

    def login(self, email: str, password: str) -> User:
        """Verify credentials and start a session."""
        email = self._normalize_email(email)
        self._check_password(password)

        user = self.repository.get(email)
        if user is None or not self.hasher.verify(password, user.password_hash):
            logger.warning(f"Failed login attempt for {email}")
            raise AuthenticationError("Invalid email or password")

        self.current_user = user
        logger.info(f"User {email} signed in")
        return user

    def logout(self) -> None:
        if self.current_user is not None:
            logger.info(f"User {self.current_user.email} signed out")
        self.current_user = None
