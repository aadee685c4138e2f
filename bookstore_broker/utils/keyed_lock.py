"""
Verrou asyncio indexe par cle.

Serialise les sections critiques portant sur un meme identifiant (verification
d'existence puis ecriture) tout en laissant les identifiants distincts
progresser en parallele. Les verrous sont crees a la demande et liberes des
qu'aucune coroutine ne les detient ni ne les attend.

Usage:
    locks = KeyedLock()
    async with locks.hold(instance_id):
        ...
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager


class KeyedLock:
    """Ensemble de verrous asyncio, un par cle active."""

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}
        self._users: dict[str, int] = {}

    @asynccontextmanager
    async def hold(self, key: str) -> AsyncIterator[None]:
        """Detient le verrou de la cle pendant le bloc."""
        lock = self._locks.setdefault(key, asyncio.Lock())
        self._users[key] = self._users.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._users[key] -= 1
            if self._users[key] == 0:
                del self._users[key]
                del self._locks[key]

    def locked(self, key: str) -> bool:
        """Indique si la cle est actuellement verrouillee."""
        lock = self._locks.get(key)
        return lock is not None and lock.locked()

    def __len__(self) -> int:
        """Nombre de cles actives (detenues ou attendues)."""
        return len(self._locks)
