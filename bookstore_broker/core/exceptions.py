"""
Exceptions du domaine.

Les erreurs "introuvable" sont distinctes et portent l'identifiant fautif,
afin que la couche transport puisse les traduire en codes de statut.
Les erreurs des dépendances (stockage, hash) ne sont jamais enveloppées.
"""


class BrokerError(Exception):
    """Base des erreurs métier du broker."""


class ServiceInstanceDoesNotExistError(BrokerError):
    """L'instance de service demandée n'existe pas."""

    def __init__(self, instance_id: str) -> None:
        self.instance_id = instance_id
        super().__init__(f"Service instance does not exist: id={instance_id}")


class ServiceBindingDoesNotExistError(BrokerError):
    """Le binding demandé n'existe pas."""

    def __init__(self, binding_id: str) -> None:
        self.binding_id = binding_id
        super().__init__(f"Service binding does not exist: id={binding_id}")


class BookStoreDoesNotExistError(BrokerError):
    """La librairie demandée n'existe pas."""

    def __init__(self, store_id: str) -> None:
        self.store_id = store_id
        super().__init__(f"Book store does not exist: id={store_id}")


class InvalidBookIdError(BrokerError, ValueError):
    """
    Identifiant de livre invalide.

    Levée quand la librairie ou le livre est introuvable ; le message porte
    les deux identifiants.
    """

    def __init__(self, store_id: str, book_id: str) -> None:
        self.store_id = store_id
        self.book_id = book_id
        super().__init__(f"Invalid book ID {store_id}:{book_id}.")
