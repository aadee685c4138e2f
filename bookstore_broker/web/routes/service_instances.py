"""
Routes des instances de service (API Open Service Broker v2).

PUT crée (201) ou constate l'existence (200), GET lit, DELETE supprime,
PATCH et last_operation sont sans effet.
"""

from fastapi import APIRouter, Request, Response, status

from ...core.value_objects import (
    CreateServiceInstanceRequest,
    DeleteServiceInstanceRequest,
    GetLastServiceOperationRequest,
    GetServiceInstanceRequest,
    UpdateServiceInstanceRequest,
)
from ..deps import get_container, with_timeout
from ..schemas import ProvisionRequestBody, ServiceInstanceBody, UpdateRequestBody

router = APIRouter(prefix="/v2/service_instances")


@router.put("/{instance_id}")
async def provision(
    instance_id: str,
    body: ProvisionRequestBody,
    request: Request,
    response: Response,
) -> dict:
    service = get_container(request).service_instance_service()
    result = await with_timeout(
        request,
        service.create_service_instance(
            CreateServiceInstanceRequest(
                service_instance_id=instance_id,
                service_definition_id=body.service_id,
                plan_id=body.plan_id,
                parameters=body.parameters,
            )
        ),
    )
    response.status_code = (
        status.HTTP_200_OK if result.instance_existed else status.HTTP_201_CREATED
    )
    return {}


@router.get("/{instance_id}", response_model=ServiceInstanceBody)
async def get_instance(instance_id: str, request: Request) -> ServiceInstanceBody:
    service = get_container(request).service_instance_service()
    result = await with_timeout(
        request,
        service.get_service_instance(GetServiceInstanceRequest(instance_id)),
    )
    return ServiceInstanceBody(
        service_id=result.service_definition_id,
        plan_id=result.plan_id,
        parameters=result.parameters,
    )


@router.patch("/{instance_id}")
async def update(instance_id: str, body: UpdateRequestBody, request: Request) -> dict:
    service = get_container(request).service_instance_service()
    await with_timeout(
        request,
        service.update_service_instance(
            UpdateServiceInstanceRequest(
                service_instance_id=instance_id,
                plan_id=body.plan_id,
                parameters=body.parameters,
            )
        ),
    )
    return {}


@router.get("/{instance_id}/last_operation")
async def last_operation(instance_id: str, request: Request) -> dict:
    service = get_container(request).service_instance_service()
    operation = await with_timeout(
        request,
        service.get_last_operation(GetLastServiceOperationRequest(instance_id)),
    )
    return {} if operation is None else {"state": operation}


@router.delete("/{instance_id}")
async def deprovision(instance_id: str, request: Request) -> dict:
    service = get_container(request).service_instance_service()
    await with_timeout(
        request,
        service.delete_service_instance(
            DeleteServiceInstanceRequest(
                service_instance_id=instance_id,
                service_definition_id=request.query_params.get("service_id"),
                plan_id=request.query_params.get("plan_id"),
            )
        ),
    )
    return {}
