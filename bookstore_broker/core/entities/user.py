"""
Entité utilisateur (principal d'accès).
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """
    Un principal d'accès : nom d'utilisateur, mot de passe et autorités.

    Le champ password contient le hash lorsque l'utilisateur provient du
    stockage, et le mot de passe en clair uniquement sur la valeur retournée
    par la création (il n'est jamais relu ensuite).

    Attributs :
        username : Nom d'utilisateur (unique)
        password : Hash ou mot de passe en clair selon la provenance
        authorities : Autorités accordées (tags opaques)
        id : Identifiant interne attribué par le stockage
    """

    username: str
    password: str
    authorities: tuple[str, ...] = ()
    id: Optional[int] = None
