"""
Persistance SQLModel asynchrone.

- database : Engine asynchrone, fabrique de sessions, creation des tables
- models : Tables SQLModel (service_instances, service_bindings, bookstores, users)
- repositories : Implementations des ports repository du domaine
"""
