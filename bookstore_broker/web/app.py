"""
Application FastAPI du broker.

Initialise l'application web avec le Container DI, cree les tables,
initialise l'administrateur et monte les routes. Les exceptions du domaine
sont traduites ici en codes de statut HTTP.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from loguru import logger

from ..container import Container
from ..core.exceptions import (
    BookStoreDoesNotExistError,
    InvalidBookIdError,
    ServiceBindingDoesNotExistError,
    ServiceInstanceDoesNotExistError,
)
from ..infrastructure.persistence.database import init_db
from .routes.bookstores import router as bookstores_router
from .routes.catalog import router as catalog_router
from .routes.service_bindings import router as service_bindings_router
from .routes.service_instances import router as service_instances_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialise le Container DI au démarrage et libère l'engine à l'arrêt.

    Un container déjà posé sur app.state (tests) est réutilisé.
    """
    container = getattr(app.state, "container", None) or Container()
    app.state.container = container

    engine = container.engine()
    await init_db(engine)
    await container.user_service().initialize_users()
    logger.info("Broker prêt", base_url=container.config().base_url)

    yield

    await engine.dispose()


app = FastAPI(title="Bookstore Service Broker", lifespan=lifespan)


def _error(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"description": str(exc)})


@app.exception_handler(ServiceInstanceDoesNotExistError)
@app.exception_handler(ServiceBindingDoesNotExistError)
async def does_not_exist_handler(request: Request, exc: Exception) -> JSONResponse:
    """Ressource broker absente : 410 sur suppression, 404 sinon."""
    if request.method == "DELETE":
        return _error(status.HTTP_410_GONE, exc)
    return _error(status.HTTP_404_NOT_FOUND, exc)


@app.exception_handler(BookStoreDoesNotExistError)
@app.exception_handler(InvalidBookIdError)
async def bookstore_not_found_handler(request: Request, exc: Exception) -> JSONResponse:
    return _error(status.HTTP_404_NOT_FOUND, exc)


@app.exception_handler(TimeoutError)
async def timeout_handler(request: Request, exc: TimeoutError) -> JSONResponse:
    logger.warning("Délai dépassé", path=request.url.path, method=request.method)
    return JSONResponse(
        status_code=status.HTTP_504_GATEWAY_TIMEOUT,
        content={"description": "Request timed out"},
    )


# Routes
app.include_router(catalog_router)
app.include_router(service_instances_router)
app.include_router(service_bindings_router)
app.include_router(bookstores_router)
