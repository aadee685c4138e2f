"""
Interfaces ports pour les capacités de sécurité.

Le hash et l'aléa sont injectés explicitement dans le service utilisateur
plutôt qu'atteints comme des singletons globaux.
"""

from abc import ABC, abstractmethod


class IPasswordEncoder(ABC):
    """Hash à sens unique des mots de passe."""

    @abstractmethod
    def encode(self, raw_password: str) -> str:
        """Retourne le hash du mot de passe en clair."""
        ...

    @abstractmethod
    def matches(self, raw_password: str, encoded_password: str) -> bool:
        """Vérifie un mot de passe en clair contre un hash."""
        ...


class IPasswordGenerator(ABC):
    """Générateur de mots de passe aléatoires."""

    @abstractmethod
    def generate(self) -> str:
        """Retourne un nouveau mot de passe aléatoire."""
        ...
