"""
EduLibrary Backend — Resource Route Handlers
==============================================

What:  The five CRUD endpoints under /api/resources.
How:   Each handler builds a ResourceService over `app.state.storage` and
       delegates; status codes for failures come from the global exception
       handlers in main.py.

    GET    /api/resources        200 list
    GET    /api/resources/{id}   200 | 404
    POST   /api/resources        201 | 400
    PATCH  /api/resources/{id}   200 | 400 | 404   (full replacement)
    DELETE /api/resources/{id}   204 | 404

Request bodies are taken as raw JSON (`Any`) so that validation is done by
validate_resource_payload() and reported as 400 with per-field details,
rather than by FastAPI's automatic 422.
"""

import logging
from typing import Any, List

from fastapi import APIRouter, Body, Depends, Request, Response

from edulibrary.schemas.resource import ErrorResponse, Resource
from edulibrary.services.resource_service import ResourceService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Resources"])


def _resource_body() -> Any:
    return Body(
        ...,
        description="Resource fields (camelCase). Any `id` in the body is ignored.",
        openapi_examples={
            "video_course": {
                "summary": "Video course with a YouTube link",
                "value": {
                    "title": "Intro to SQL",
                    "description": "Querying relational data from SELECT to window functions.",
                    "category": "Data Science",
                    "skillLevel": "Beginner",
                    "imageUrl": "https://example.com/sql.png",
                    "resourceType": "Video Course",
                    "videoUrl": "https://youtu.be/HXV3zeQKqGY",
                },
            }
        },
    )


_SERVER_ERROR = {500: {"description": "Server error", "model": ErrorResponse}}
_NOT_FOUND = {404: {"description": "Resource not found", "model": ErrorResponse}}
_INVALID = {400: {"description": "Invalid resource data", "model": ErrorResponse}}


def get_resource_service(request: Request) -> ResourceService:
    """FastAPI dependency: service over the storage chosen at app construction."""
    return ResourceService(request.app.state.storage)


@router.get(
    "/resources",
    response_model=List[Resource],
    responses={**_SERVER_ERROR},
    summary="List all resources",
)
async def list_resources(
    service: ResourceService = Depends(get_resource_service),
) -> List[Resource]:
    return await service.list_resources()


@router.get(
    "/resources/{resource_id}",
    response_model=Resource,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
    summary="Get a single resource by ID",
)
async def get_resource(
    resource_id: str,
    service: ResourceService = Depends(get_resource_service),
) -> Resource:
    return await service.get_resource(resource_id)


@router.post(
    "/resources",
    status_code=201,
    response_model=Resource,
    responses={**_INVALID, **_SERVER_ERROR},
    summary="Create a resource",
)
async def create_resource(
    payload: Any = _resource_body(),
    service: ResourceService = Depends(get_resource_service),
) -> Resource:
    return await service.create_resource(payload)


@router.patch(
    "/resources/{resource_id}",
    response_model=Resource,
    responses={**_INVALID, **_NOT_FOUND, **_SERVER_ERROR},
    summary="Replace a resource",
    description=(
        "Replaces every field of the resource with the request body. "
        "Fields are not merged: the body must be a complete resource."
    ),
)
async def update_resource(
    resource_id: str,
    payload: Any = _resource_body(),
    service: ResourceService = Depends(get_resource_service),
) -> Resource:
    return await service.update_resource(resource_id, payload)


@router.delete(
    "/resources/{resource_id}",
    status_code=204,
    response_class=Response,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
    summary="Delete a resource",
)
async def delete_resource(
    resource_id: str,
    service: ResourceService = Depends(get_resource_service),
) -> Response:
    await service.delete_resource(resource_id)
    return Response(status_code=204)
