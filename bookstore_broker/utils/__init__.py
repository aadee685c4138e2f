"""Utilitaires partagés (constantes, verrous par clé)."""
