"""Password Hasher Interface"""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """Hashes and verifies user passwords"""

    @abstractmethod
    def hash(self, password: str) -> str:
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        pass
