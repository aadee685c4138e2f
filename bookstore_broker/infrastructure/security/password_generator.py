"""
Generation de mots de passe aleatoires.

Utilise le module secrets (source cryptographiquement sure) : chaque caractere
est tire uniformement dans l'alphabet.
"""

import secrets

from bookstore_broker.core.ports.security import IPasswordGenerator
from bookstore_broker.utils.constants import PASSWORD_CHARS, PASSWORD_LENGTH


class SecurePasswordGenerator(IPasswordGenerator):
    """Generateur de mots de passe de longueur fixe."""

    def __init__(
        self,
        length: int = PASSWORD_LENGTH,
        alphabet: str = PASSWORD_CHARS,
    ) -> None:
        if length <= 0:
            raise ValueError("Password length must be positive")
        if not alphabet:
            raise ValueError("Password alphabet must not be empty")
        self._length = length
        self._alphabet = alphabet

    @property
    def length(self) -> int:
        return self._length

    def generate(self) -> str:
        return "".join(secrets.choice(self._alphabet) for _ in range(self._length))
