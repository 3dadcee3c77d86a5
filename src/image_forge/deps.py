"""
Proporciona las instancias compartidas que se inyectan en los endpoints

Gestiona:
- Configuración de la aplicación (`Settings`) y lista de orígenes permitidos
- Cliente de Workers AI
- Autenticación opcional por API key

Todo se crea una vez en `create_app()` y se guarda en `app.state`; los endpoints
lo obtienen a través de estas dependencias.
"""

import hmac
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import HTTPException, Request

from image_forge.config import Settings
from image_forge.workers_ai import WorkersAIClient

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_ai_client(request: Request) -> WorkersAIClient:
    return request.app.state.ai_client


def is_authorized(authorization: Optional[str], api_key: Optional[str]) -> bool:
    """
    With no API key configured every request is allowed. Otherwise the header
    must be exactly "Bearer <api_key>".
    """
    if not api_key:
        return True
    auth = authorization or ""
    token = auth[len(BEARER_PREFIX):] if auth.startswith(BEARER_PREFIX) else ""
    return hmac.compare_digest(token.encode("utf-8"), api_key.encode("utf-8"))


async def verify_api_key(request: Request) -> None:
    settings = get_settings(request)
    if not is_authorized(request.headers.get("Authorization"), settings.api_key):
        logger.warning("Rejected request from %s: bad or missing API key", request.client.host if request.client else "?")
        raise HTTPException(status_code=401, detail="Unauthorized")


@asynccontextmanager
async def lifespan(app):
    settings: Settings = app.state.settings
    logger.info(
        "Image forge starting: %d allowed origins, API key auth %s",
        len(app.state.allowed_origins),
        "enabled" if settings.api_key else "disabled",
    )
    if not app.state.ai_client.is_configured():
        logger.warning("Workers AI credentials missing; /api/generate will answer 502")
    yield

    logger.info("Image forge shutting down.")
