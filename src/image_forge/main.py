import logging
from typing import Optional

from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

import image_forge.routers.api as api_router
from image_forge.config import HOST, PORT, Settings, load_settings
from image_forge.deps import lifespan
from image_forge.logger import setup_logging
from image_forge.services.cors import compute_allowed_origins, cors_headers
from image_forge.workers_ai import WorkersAIClient

logger = logging.getLogger(__name__)

# Plain-text bodies for the errors Starlette raises on its own.
ROUTING_MESSAGES = {
    404: "Not found",
    405: "Method not allowed",
}


def create_app(settings: Optional[Settings] = None, ai_client=None) -> FastAPI:

    settings = settings or load_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title="eBook Image Forge", lifespan=lifespan, docs_url=None, redoc_url=None, openapi_url=None)
    app.state.settings = settings
    app.state.allowed_origins = compute_allowed_origins(settings)
    app.state.ai_client = ai_client or WorkersAIClient(
        settings.cf_account_id, settings.cf_api_token, settings.cf_api_base_url
    )

    @app.exception_handler(StarletteHTTPException)
    async def plain_text_http_error(request: Request, exc: StarletteHTTPException):
        message = ROUTING_MESSAGES.get(exc.status_code, str(exc.detail))
        return PlainTextResponse(message, status_code=exc.status_code, headers=getattr(exc, "headers", None))

    @app.middleware("http")
    async def cors_middleware(request: Request, call_next):
        if request.method == "OPTIONS":
            response = Response(status_code=204)
        else:
            try:
                response = await call_next(request)
            except Exception:
                logger.exception("Unhandled error on %s %s", request.method, request.url.path)
                response = PlainTextResponse("Internal server error", status_code=500)

        for name, value in cors_headers(request.headers.get("Origin"), app.state.allowed_origins).items():
            response.headers.setdefault(name, value)
        return response

    app.include_router(api_router.get_router())
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=HOST, port=PORT)
