"""
In-Memory Repository Implementations.

For testing and local development. NOT FOR PRODUCTION.
Data is lost on process restart.
"""

from .auth import InMemoryAuthRepository
from .reset_code import InMemoryResetCodeRepository

__all__ = [
    # Credentials + user profiles (AuthRepository and UserRepository)
    "InMemoryAuthRepository",
    # Forgot password
    "InMemoryResetCodeRepository",
]
