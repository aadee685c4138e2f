"""
Bookstore Broker - Service broker provisionnant des librairies a la demande.

Ce package expose une API de provisionnement (service instances et service
bindings) dont chaque instance est adossee a une librairie (bookstore) et
chaque binding a un utilisateur dedie avec des identifiants generes.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, objets valeur, exceptions)
- services/ : Couche application (cycle de vie des instances et bindings)
- infrastructure/ : Persistance SQLModel et adaptateurs de securite
- web/ : Transport HTTP (FastAPI)
"""

__version__ = "0.1.0"
