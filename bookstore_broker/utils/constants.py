"""
Constantes globales du broker.

Ce module contient les constantes partagées entre les services et la couche web:
- Segment de chemin de la collection de librairies
- Clés des identifiants renvoyés par les bindings
- Alphabet des mots de passe générés
"""

# Segment de chemin des librairies dans l'API (/bookstores/{id})
BOOK_STORES_PATH = "bookstores"

# Clés du dictionnaire d'identifiants d'un binding
URI_KEY = "uri"
USERNAME_KEY = "username"
PASSWORD_KEY = "password"

# Alphabet alphanumerique de 62 symboles
PASSWORD_CHARS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
PASSWORD_LENGTH = 12
