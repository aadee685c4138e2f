"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports repository : Contrats de persistance asynchrones
- IServiceInstanceRepository : Stockage des instances de service
- IServiceBindingRepository : Stockage des bindings
- IBookStoreRepository : Stockage des librairies
- IUserRepository : Stockage des utilisateurs

Ports sécurité : Capacités injectées dans le service utilisateur
- IPasswordEncoder : Hash à sens unique des mots de passe
- IPasswordGenerator : Génération aléatoire de mots de passe
"""

from bookstore_broker.core.ports.repositories import (
    IBookStoreRepository,
    IServiceBindingRepository,
    IServiceInstanceRepository,
    IUserRepository,
)
from bookstore_broker.core.ports.security import (
    IPasswordEncoder,
    IPasswordGenerator,
)

__all__ = [
    # Repositories
    "IServiceInstanceRepository",
    "IServiceBindingRepository",
    "IBookStoreRepository",
    "IUserRepository",
    # Sécurité
    "IPasswordEncoder",
    "IPasswordGenerator",
]
