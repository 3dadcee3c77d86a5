"""Este módulo contiene las variables de configuración de la aplicación.

Los valores se leen del entorno (y de un fichero .env si existe) una sola vez
al importar el módulo. `load_settings()` los agrupa en un `Settings` inmutable
que la app recibe al crearse.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

SERVICE_VERSION: str = "ebook-image-forge v5 (prompt<=2048 + resilient CORS + stronger no-text)"

API_KEY: Optional[str] = os.getenv("API_KEY") or None
ALLOWED_ORIGIN: Optional[str] = os.getenv("ALLOWED_ORIGIN")
ALLOWED_ORIGINS: Optional[str] = os.getenv("ALLOWED_ORIGINS")

CF_ACCOUNT_ID: Optional[str] = os.getenv("CF_ACCOUNT_ID")
CF_API_TOKEN: Optional[str] = os.getenv("CF_API_TOKEN")
CF_API_BASE_URL: str = os.getenv("CF_API_BASE_URL", "https://api.cloudflare.com/client/v4")

HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "8000"))
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


@dataclass(frozen=True)
class Settings:
    api_key: Optional[str] = None
    allowed_origin: Optional[str] = None
    allowed_origins: Optional[str] = None
    cf_account_id: Optional[str] = None
    cf_api_token: Optional[str] = None
    cf_api_base_url: str = "https://api.cloudflare.com/client/v4"
    log_level: str = "INFO"


def load_settings() -> Settings:
    return Settings(
        api_key=API_KEY,
        allowed_origin=ALLOWED_ORIGIN,
        allowed_origins=ALLOWED_ORIGINS,
        cf_account_id=CF_ACCOUNT_ID,
        cf_api_token=CF_API_TOKEN,
        cf_api_base_url=CF_API_BASE_URL,
        log_level=LOG_LEVEL,
    )
