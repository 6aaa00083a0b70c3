"""Domain interfaces (ports) implemented by the infrastructure layer."""

from .repositories import IUserRepository
from .security import IPasswordHasher, ITokenSigner

__all__ = ["IUserRepository", "IPasswordHasher", "ITokenSigner"]
