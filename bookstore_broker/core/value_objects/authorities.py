"""
Autorités de sécurité.

Les autorités sont des chaînes opaques pour le domaine : il se contente de
les construire et de les attacher aux utilisateurs.
"""


class SecurityAuthorities:
    """Tags d'autorité connus de l'application."""

    ADMIN = "ROLE_ADMIN"
    FULL_ACCESS = "FULL_ACCESS"
    BOOK_STORE_ID_PREFIX = "BOOK_STORE_ID_"

    @classmethod
    def for_book_store(cls, store_id: str) -> str:
        """Autorité donnant accès à une librairie précise."""
        return cls.BOOK_STORE_ID_PREFIX + store_id
