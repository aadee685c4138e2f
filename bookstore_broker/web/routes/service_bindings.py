"""
Routes des bindings (API Open Service Broker v2).
"""

from fastapi import APIRouter, Request, Response, status

from ...core.value_objects import (
    CreateServiceInstanceBindingRequest,
    DeleteServiceInstanceBindingRequest,
    GetServiceInstanceBindingRequest,
)
from ..deps import get_container, with_timeout
from ..schemas import BindingBody, BindRequestBody

router = APIRouter(prefix="/v2/service_instances/{instance_id}/service_bindings")


@router.put("/{binding_id}", response_model=BindingBody, response_model_exclude_none=True)
async def bind(
    instance_id: str,
    binding_id: str,
    body: BindRequestBody,
    request: Request,
    response: Response,
) -> BindingBody:
    """Crée le binding (201) ou renvoie les identifiants existants (200)."""
    service = get_container(request).service_binding_service()
    result = await with_timeout(
        request,
        service.create_service_instance_binding(
            CreateServiceInstanceBindingRequest(
                binding_id=binding_id,
                service_instance_id=instance_id,
                service_definition_id=body.service_id,
                plan_id=body.plan_id,
                parameters=body.parameters,
            )
        ),
    )
    response.status_code = (
        status.HTTP_200_OK if result.binding_existed else status.HTTP_201_CREATED
    )
    return BindingBody(credentials=result.credentials)


@router.get("/{binding_id}", response_model=BindingBody)
async def get_binding(instance_id: str, binding_id: str, request: Request) -> BindingBody:
    service = get_container(request).service_binding_service()
    result = await with_timeout(
        request,
        service.get_service_instance_binding(
            GetServiceInstanceBindingRequest(
                service_instance_id=instance_id,
                binding_id=binding_id,
            )
        ),
    )
    return BindingBody(credentials=result.credentials, parameters=result.parameters)


@router.delete("/{binding_id}")
async def unbind(instance_id: str, binding_id: str, request: Request) -> dict:
    service = get_container(request).service_binding_service()
    await with_timeout(
        request,
        service.delete_service_instance_binding(
            DeleteServiceInstanceBindingRequest(
                service_instance_id=instance_id,
                binding_id=binding_id,
            )
        ),
    )
    return {}
