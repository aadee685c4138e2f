"""
Couche infrastructure : adaptateurs concrets des ports du domaine.

- persistence/ : Stockage SQLModel asynchrone (SQLite via aiosqlite)
- security/ : Hash PBKDF2 et génération de mots de passe
"""
