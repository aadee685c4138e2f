"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites), objets valeur
et exceptions. Cette couche n'a AUCUNE dépendance vers l'infrastructure
(SQLModel, FastAPI, cryptographie).

Sous-packages :
- entities/ : Entités métier (ServiceInstance, ServiceBinding, BookStore, Book, User)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- value_objects/ : Requêtes/réponses du broker et autorités de sécurité
"""
