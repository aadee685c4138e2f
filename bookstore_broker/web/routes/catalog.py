"""
Route du catalogue Open Service Broker.

Expose un service unique (la librairie) avec un plan unique, tous deux
configures via Settings.
"""

from fastapi import APIRouter, Request

from ..deps import get_container

router = APIRouter()


@router.get("/v2/catalog")
async def get_catalog(request: Request) -> dict:
    """Catalogue des services proposés par le broker."""
    settings = get_container(request).config()
    return {
        "services": [
            {
                "id": settings.service_id,
                "name": settings.service_name,
                "description": settings.service_description,
                "bindable": True,
                "plan_updateable": False,
                "tags": ["book-store", "books", "sample"],
                "plans": [
                    {
                        "id": settings.plan_id,
                        "name": settings.plan_name,
                        "description": settings.plan_description,
                        "free": True,
                    }
                ],
            }
        ]
    }
