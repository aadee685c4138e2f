"""
Schemas pydantic des corps de requete et de reponse HTTP.

Seuls les champs utiles au broker sont declares ; les champs supplementaires
envoyes par la plateforme (context, organization_guid, ...) sont ignores.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProvisionRequestBody(BaseModel):
    """Corps de PUT /v2/service_instances/{instance_id}."""

    model_config = ConfigDict(extra="ignore")

    service_id: Optional[str] = None
    plan_id: Optional[str] = None
    parameters: dict[str, Any] = Field(default_factory=dict)


class UpdateRequestBody(BaseModel):
    """Corps de PATCH /v2/service_instances/{instance_id}."""

    model_config = ConfigDict(extra="ignore")

    service_id: Optional[str] = None
    plan_id: Optional[str] = None
    parameters: dict[str, Any] = Field(default_factory=dict)


class BindRequestBody(BaseModel):
    """Corps de PUT /v2/service_instances/{instance_id}/service_bindings/{binding_id}."""

    model_config = ConfigDict(extra="ignore")

    service_id: Optional[str] = None
    plan_id: Optional[str] = None
    parameters: dict[str, Any] = Field(default_factory=dict)


class ServiceInstanceBody(BaseModel):
    service_id: Optional[str] = None
    plan_id: Optional[str] = None
    parameters: dict[str, Any] = Field(default_factory=dict)


class BindingBody(BaseModel):
    credentials: dict[str, Any] = Field(default_factory=dict)
    parameters: Optional[dict[str, Any]] = None


class BookBody(BaseModel):
    """Livre tel qu'echange par l'API des librairies."""

    id: Optional[str] = None
    isbn: str = ""
    title: str = ""
    author: str = ""


class BookStoreBody(BaseModel):
    id: str
    books: list[BookBody] = Field(default_factory=list)
