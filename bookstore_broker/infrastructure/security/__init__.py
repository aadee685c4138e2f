"""
Adaptateurs de sécurité implémentant les ports IPasswordEncoder et IPasswordGenerator.
"""

from bookstore_broker.infrastructure.security.password_encoder import (
    Pbkdf2PasswordEncoder,
)
from bookstore_broker.infrastructure.security.password_generator import (
    SecurePasswordGenerator,
)

__all__ = [
    "Pbkdf2PasswordEncoder",
    "SecurePasswordGenerator",
]
