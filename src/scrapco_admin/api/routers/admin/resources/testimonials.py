from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field
from starlette.status import HTTP_201_CREATED

from scrapco_admin.api.deps import client_factory_dep
from scrapco_admin.api.routers.admin.body import admin_body
from scrapco_admin.data_service.factory import ClientFactory
from scrapco_admin.services.site_content import TestimonialService

router = APIRouter()


class TestimonialBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: Any = None
    quote: Any = None
    role: Any = None
    rating: Any = None
    sort_order: Any = Field(default=None, alias="sortOrder")
    is_active: Any = Field(default=None, alias="isActive")


def _sent_fields(body: TestimonialBody | None) -> dict[str, Any]:
    return body.model_dump(by_alias=True, exclude_unset=True) if body else {}


@router.get("")
async def list_testimonials(
    factory: ClientFactory = Depends(client_factory_dep),
) -> dict[str, Any]:
    testimonials = await TestimonialService(factory.service_client()).list()
    return {"success": True, "testimonials": testimonials}


@router.post("", status_code=HTTP_201_CREATED)
async def create_testimonial(
    body: TestimonialBody | None = Depends(admin_body(TestimonialBody)),
    factory: ClientFactory = Depends(client_factory_dep),
) -> dict[str, Any]:
    testimonial = await TestimonialService(factory.service_client()).create(_sent_fields(body))
    return {"success": True, "testimonial": testimonial}


@router.patch("/{testimonial_id}")
async def update_testimonial(
    testimonial_id: str,
    body: TestimonialBody | None = Depends(admin_body(TestimonialBody)),
    factory: ClientFactory = Depends(client_factory_dep),
) -> dict[str, Any]:
    service = TestimonialService(factory.service_client())
    testimonial = await service.update(testimonial_id, _sent_fields(body))
    return {"success": True, "testimonial": testimonial}
