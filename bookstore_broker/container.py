"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
Inclut l'engine asynchrone, les repositories SQLModel, les adaptateurs de
securite et les services de cycle de vie.
"""

from dependency_injector import containers, providers

from .config import Settings
from .infrastructure.persistence.database import create_engine, create_session_factory
from .infrastructure.persistence.repositories import (
    SQLModelBookStoreRepository,
    SQLModelServiceBindingRepository,
    SQLModelServiceInstanceRepository,
    SQLModelUserRepository,
)
from .infrastructure.security import Pbkdf2PasswordEncoder, SecurePasswordGenerator
from .services.bookstore import BookStoreService
from .services.service_binding import ServiceInstanceBindingService
from .services.service_instance import ServiceInstanceService
from .services.user import UserService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        await init_db(container.engine())
        instances = container.service_instance_service()

    Les services de cycle de vie sont des Singletons : leurs verrous par ID
    doivent etre partages par toutes les requetes du processus.
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Database - engine asynchrone et fabrique de sessions
    engine = providers.Singleton(
        create_engine,
        database_url=config.provided.database_url,
    )
    session_factory = providers.Singleton(create_session_factory, engine=engine)

    # Repositories - une session par operation, donc partageables
    service_instance_repository = providers.Singleton(
        SQLModelServiceInstanceRepository,
        session_factory=session_factory,
    )
    service_binding_repository = providers.Singleton(
        SQLModelServiceBindingRepository,
        session_factory=session_factory,
    )
    bookstore_repository = providers.Singleton(
        SQLModelBookStoreRepository,
        session_factory=session_factory,
    )
    user_repository = providers.Singleton(
        SQLModelUserRepository,
        session_factory=session_factory,
    )

    # Securite - capacites injectees dans UserService
    password_encoder = providers.Singleton(
        Pbkdf2PasswordEncoder,
        iterations=config.provided.password_hash_iterations,
    )
    password_generator = providers.Singleton(
        SecurePasswordGenerator,
        length=config.provided.password_length,
    )

    # Services metier
    bookstore_service = providers.Singleton(
        BookStoreService,
        repository=bookstore_repository,
    )
    user_service = providers.Singleton(
        UserService,
        user_repo=user_repository,
        password_encoder=password_encoder,
        password_generator=password_generator,
        admin_username=config.provided.admin_username,
        admin_password=config.provided.admin_password,
    )

    # Services de cycle de vie du broker
    service_instance_service = providers.Singleton(
        ServiceInstanceService,
        store_service=bookstore_service,
        instance_repo=service_instance_repository,
    )
    service_binding_service = providers.Singleton(
        ServiceInstanceBindingService,
        binding_repo=service_binding_repository,
        user_service=user_service,
        base_url=config.provided.base_url,
    )
