"""
Política de orígenes (CORS)

Calcula la lista de orígenes permitidos y las cabeceras CORS de cada respuesta.
Solo se devuelve Access-Control-Allow-Origin cuando el Origin de la petición
coincide exactamente con un origen permitido; nunca "*" ni una cadena vacía.
"""

from typing import Optional

from image_forge.config import Settings

DEFAULT_ALLOWED_ORIGINS = frozenset(
    {
        "http://localhost:8080",
        "http://127.0.0.1:8080",
        "http://[::1]:8080",
        "https://www.webhtml5.info",
        "https://webhtml5.info",
    }
)

DIAGNOSTIC_HEADERS = ("X-Model", "X-Steps", "X-Style", "X-Num-Steps", "X-Guidance", "X-Prompt-Chars")

BASE_CORS_HEADERS = {
    "Vary": "Origin",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
    "Access-Control-Max-Age": "86400",
    "Access-Control-Expose-Headers": ", ".join(DIAGNOSTIC_HEADERS),
}


def parse_origin_list(value: Optional[str]) -> set:
    if not value:
        return set()
    return {part.strip() for part in value.split(",") if part.strip()}


def compute_allowed_origins(settings: Settings) -> frozenset:
    allowed = set(DEFAULT_ALLOWED_ORIGINS)
    if settings.allowed_origin and settings.allowed_origin.strip():
        allowed.add(settings.allowed_origin.strip())
    allowed |= parse_origin_list(settings.allowed_origins)
    return frozenset(allowed)


def cors_headers(origin: Optional[str], allowed: frozenset) -> dict:
    headers = dict(BASE_CORS_HEADERS)
    if origin and origin in allowed:
        headers["Access-Control-Allow-Origin"] = origin
    return headers
