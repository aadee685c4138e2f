"""
Service des utilisateurs (principaux d'accès).

Les utilisateurs portent les identifiants émis par les bindings. Le hash et
la génération de mot de passe sont des capacités injectées (ports
IPasswordEncoder et IPasswordGenerator).
"""

import asyncio

from loguru import logger

from bookstore_broker.core.entities import User
from bookstore_broker.core.ports.repositories import IUserRepository
from bookstore_broker.core.ports.security import IPasswordEncoder, IPasswordGenerator
from bookstore_broker.core.value_objects import SecurityAuthorities


class UserService:
    """
    Service de création et suppression des utilisateurs.

    Le mot de passe en clair n'existe que sur la valeur retournée par
    create_user ; seul son hash est persisté.
    """

    def __init__(
        self,
        user_repo: IUserRepository,
        password_encoder: IPasswordEncoder,
        password_generator: IPasswordGenerator,
        admin_username: str = "admin",
        admin_password: str = "supersecret",
    ) -> None:
        """
        Initialise le service.

        Args :
            user_repo : Repository des utilisateurs
            password_encoder : Hash à sens unique des mots de passe
            password_generator : Générateur de mots de passe aléatoires
            admin_username : Nom de l'administrateur créé au démarrage
            admin_password : Mot de passe de l'administrateur
        """
        self._user_repo = user_repo
        self._password_encoder = password_encoder
        self._password_generator = password_generator
        self._admin_username = admin_username
        self._admin_password = admin_password

    async def _encode(self, raw_password: str) -> str:
        # PBKDF2 est coûteux en CPU : hors de la boucle d'événements
        return await asyncio.to_thread(self._password_encoder.encode, raw_password)

    async def create_user(self, username: str, *authorities: str) -> User:
        """
        Crée un utilisateur avec un mot de passe généré.

        Args :
            username : Nom d'utilisateur (unique)
            authorities : Autorités accordées

        Retourne :
            L'utilisateur stocké, portant le mot de passe EN CLAIR
        """
        password = self._password_generator.generate()
        encoded_password = await self._encode(password)

        saved = await self._user_repo.save(
            User(username=username, password=encoded_password, authorities=authorities)
        )
        logger.info("Utilisateur créé", username=username, authorities=list(authorities))

        return User(
            id=saved.id,
            username=saved.username,
            password=password,
            authorities=saved.authorities,
        )

    async def delete_user(self, username: str) -> None:
        """Supprime l'utilisateur de ce nom ; sans effet s'il n'existe pas."""
        user = await self._user_repo.find_by_username(username)
        if user is None:
            logger.debug("Aucun utilisateur à supprimer", username=username)
            return

        await self._user_repo.delete(user.id)
        logger.info("Utilisateur supprimé", username=username)

    async def initialize_users(self) -> bool:
        """
        Crée l'administrateur si aucun utilisateur n'existe.

        Le test porte sur le stockage entier, pas sur le nom de l'administrateur.

        Retourne :
            True si l'administrateur a été créé
        """
        if await self._user_repo.count() > 0:
            return False

        encoded_password = await self._encode(self._admin_password)
        await self._user_repo.save(
            User(
                username=self._admin_username,
                password=encoded_password,
                authorities=(SecurityAuthorities.ADMIN, SecurityAuthorities.FULL_ACCESS),
            )
        )
        logger.info("Administrateur initialisé", username=self._admin_username)
        return True
