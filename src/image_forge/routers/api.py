import json

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from image_forge.config import SERVICE_VERSION
from image_forge.deps import get_ai_client, verify_api_key
from image_forge.schemas import GenerationRequest, first_error_message
from image_forge.services.generation import generate_image
from image_forge.workers_ai import WorkersAIClient

ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "TRACE", "CONNECT"]

router = APIRouter()


@router.api_route("/__version", methods=ANY_METHOD)
async def version():
    return PlainTextResponse(SERVICE_VERSION)


def _reject_constant(name):
    raise ValueError(f"non-standard JSON constant: {name}")


async def read_json_object(request: Request) -> dict:
    try:
        payload = json.loads(await request.body(), parse_constant=_reject_constant)
    except ValueError as e:
        raise HTTPException(status_code=400, detail="Invalid JSON") from e
    if not isinstance(payload, dict):
        raise HTTPException(status_code=400, detail="Invalid JSON")
    return payload


@router.post("/api/generate", dependencies=[Depends(verify_api_key)])
async def generate(request: Request, client: WorkersAIClient = Depends(get_ai_client)):
    """Generate an image and return its bytes with diagnostic headers."""
    payload = await read_json_object(request)

    try:
        req = GenerationRequest.model_validate(payload)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=first_error_message(e)) from e

    result = await generate_image(client, req)

    headers = {"Cache-Control": "no-store", **result.headers}
    return Response(content=result.image, media_type="image/jpeg", headers=headers)


def get_router():
    return router
