"""
Dependances partagees de l'application web.

Donne acces au Container DI stocke sur l'application et borne la duree
de chaque appel aux services par request_timeout_seconds.
"""

import asyncio
from collections.abc import Awaitable
from typing import TypeVar

from fastapi import Request

from ..container import Container

T = TypeVar("T")


def get_container(request: Request) -> Container:
    """Container DI initialise par le lifespan."""
    return request.app.state.container


async def with_timeout(request: Request, awaitable: Awaitable[T]) -> T:
    """
    Attend un appel de service dans la limite du delai configure.

    Le depassement leve TimeoutError (traduit en 504) ; l'appel interrompu
    recoit CancelledError.
    """
    settings = get_container(request).config()
    return await asyncio.wait_for(awaitable, timeout=settings.request_timeout_seconds)
