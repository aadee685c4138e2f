"""
Modeles SQLModel pour la base de donnees du broker.

Ces modeles representent les tables de la base de donnees.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- service_instances: Instances de service provisionnees
- service_bindings: Bindings et identifiants emis
- bookstores: Librairies, livres compris (reecrites en entier a chaque mutation)
- users: Utilisateurs (hash du mot de passe, autorites)

Les champs JSON (*_json) stockent dictionnaires et listes de maniere
serialisee.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any

from sqlmodel import Field, SQLModel


def _utcnow() -> datetime:
    """Horodatage UTC avec fuseau (les colonnes DateTime le requierent)."""
    return datetime.now(timezone.utc)


class ServiceInstanceModel(SQLModel, table=True):
    """Instance de service, identifiee par l'ID fourni par la plateforme."""

    __tablename__ = "service_instances"

    instance_id: str = Field(primary_key=True)
    service_definition_id: str | None = None
    plan_id: str | None = None
    parameters_json: str | None = None  # JSON: {"cle": "valeur"}
    created_at: datetime | None = Field(default_factory=_utcnow)

    @property
    def parameters(self) -> dict[str, Any]:
        """Retourne les parametres deserialises."""
        if self.parameters_json:
            return json.loads(self.parameters_json)
        return {}


class ServiceBindingModel(SQLModel, table=True):
    """Binding, identifie globalement par son ID (pas de cle composite)."""

    __tablename__ = "service_bindings"

    binding_id: str = Field(primary_key=True)
    parameters_json: str | None = None
    credentials_json: str | None = None  # JSON: {"uri", "username", "password"}
    created_at: datetime | None = Field(default_factory=_utcnow)

    @property
    def parameters(self) -> dict[str, Any]:
        """Retourne les parametres deserialises."""
        if self.parameters_json:
            return json.loads(self.parameters_json)
        return {}

    @property
    def credentials(self) -> dict[str, Any]:
        """Retourne les identifiants deserialises."""
        if self.credentials_json:
            return json.loads(self.credentials_json)
        return {}


class BookStoreModel(SQLModel, table=True):
    """
    Librairie et ses livres.

    Les livres sont stockes dans une seule colonne JSON : toute mutation
    reecrit l'enregistrement complet.
    """

    __tablename__ = "bookstores"

    id: str = Field(primary_key=True)
    books_json: str = Field(default="[]")  # JSON: [{"id", "isbn", "title", "author"}]
    updated_at: datetime | None = Field(default_factory=_utcnow)

    @property
    def books(self) -> list[dict[str, Any]]:
        """Retourne les livres deserialises."""
        return json.loads(self.books_json) if self.books_json else []


class UserModel(SQLModel, table=True):
    """
    Utilisateur (principal d'acces).

    L'unicite du nom d'utilisateur est garantie par un index unique.
    """

    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)
    username: str = Field(index=True, unique=True)
    password: str  # hash PBKDF2, jamais le mot de passe en clair
    authorities_json: str = Field(default="[]")  # JSON: ["FULL_ACCESS", ...]
    created_at: datetime | None = Field(default_factory=_utcnow)

    @property
    def authorities(self) -> list[str]:
        """Retourne les autorites deserialisees."""
        return json.loads(self.authorities_json) if self.authorities_json else []
