"""
Hash des mots de passe par PBKDF2-HMAC-SHA256.

Format du hash encode (champs separes par '$') :
    pbkdf2_sha256$<iterations>$<sel base64>$<derive base64>

Le sel est aleatoire (16 octets) pour chaque hash : deux hashes d'un meme
mot de passe different, la verification relit iterations et sel depuis le hash.
"""

import base64
import os

from cryptography.exceptions import InvalidKey
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from bookstore_broker.core.ports.security import IPasswordEncoder

ALGORITHM = "pbkdf2_sha256"
SALT_SIZE = 16
KEY_LENGTH = 32


class Pbkdf2PasswordEncoder(IPasswordEncoder):
    """Encodeur de mots de passe PBKDF2 (cryptography)."""

    def __init__(self, iterations: int = 100_000) -> None:
        """
        Initialise l'encodeur.

        Args :
            iterations : Nombre d'iterations PBKDF2 pour les nouveaux hashes
        """
        self._iterations = iterations

    @staticmethod
    def _kdf(salt: bytes, iterations: int) -> PBKDF2HMAC:
        return PBKDF2HMAC(
            algorithm=hashes.SHA256(),
            length=KEY_LENGTH,
            salt=salt,
            iterations=iterations,
        )

    def encode(self, raw_password: str) -> str:
        salt = os.urandom(SALT_SIZE)
        derived = self._kdf(salt, self._iterations).derive(raw_password.encode())
        return "$".join(
            (
                ALGORITHM,
                str(self._iterations),
                base64.b64encode(salt).decode(),
                base64.b64encode(derived).decode(),
            )
        )

    def matches(self, raw_password: str, encoded_password: str) -> bool:
        """
        Verifie un mot de passe contre un hash produit par encode().

        Retourne False pour un hash mal forme ou d'un autre algorithme.
        """
        parts = encoded_password.split("$")
        if len(parts) != 4 or parts[0] != ALGORITHM:
            return False
        try:
            iterations = int(parts[1])
            salt = base64.b64decode(parts[2])
            expected = base64.b64decode(parts[3])
        except ValueError:
            return False

        try:
            # verify() compare en temps constant
            self._kdf(salt, iterations).verify(raw_password.encode(), expected)
        except InvalidKey:
            return False
        return True
