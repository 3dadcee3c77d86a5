"""
Cliente para la interacción con Workers AI.

Este módulo contiene toda la comunicación con la API REST de Cloudflare Workers AI,
el servicio que ejecuta los modelos de generación de imágenes.

Responsabilidades:
- Construir la URL de ejecución de cada modelo
- Enviar los parámetros del modelo autenticados con el token de la cuenta
- Devolver el resultado tal cual llega (JSON o bytes de imagen)
- Traducir los errores de red y de la API a `UpstreamError`
"""

import logging
from typing import Optional, Union

import requests

logger = logging.getLogger(__name__)


class UpstreamError(Exception):
    """The generation capability failed or returned something unusable."""


class NoImageError(UpstreamError):
    def __init__(self, message: str = "Model returned no image"):
        super().__init__(message)


class WorkersAIClient:

    def __init__(
        self,
        account_id: Optional[str],
        api_token: Optional[str],
        base_url: str = "https://api.cloudflare.com/client/v4",
    ):
        self.account_id = account_id
        self.api_token = api_token
        self.base_url = base_url.rstrip("/")
        self.run_url = f"{self.base_url}/accounts/{account_id}/ai/run/"

    def is_configured(self) -> bool:
        return bool(self.account_id and self.api_token)

    def run(self, model: str, inputs: dict) -> Union[dict, bytes]:
        """Runs `model` with `inputs`.

        JSON responses are unwrapped to their ``result`` object. Any other
        successful response (the image models that stream binary output) is
        returned as raw bytes.
        """
        if not self.is_configured():
            raise UpstreamError("Workers AI credentials are not configured")

        headers = {"Authorization": f"Bearer {self.api_token}"}
        try:
            response = requests.post(f"{self.run_url}{model}", json=inputs, headers=headers)
        except requests.exceptions.RequestException as e:
            logger.warning("Workers AI request for %s failed: %s", model, e)
            raise UpstreamError(str(e)) from e

        content_type = response.headers.get("Content-Type", "")
        if content_type.startswith("application/json"):
            return self._unwrap_json(response)

        if response.status_code != 200:
            raise UpstreamError(f"{response.status_code} - {response.text}")
        return response.content

    @staticmethod
    def _unwrap_json(response: requests.Response) -> dict:
        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError(f"{response.status_code} - invalid JSON from Workers AI") from e

        if response.status_code == 200 and isinstance(data, dict) and data.get("success", True):
            result = data.get("result")
            if not isinstance(result, dict):
                raise NoImageError()
            return result

        errors = data.get("errors") if isinstance(data, dict) else None
        messages = [
            str(err.get("message")) for err in errors or [] if isinstance(err, dict) and err.get("message")
        ]
        if messages:
            raise UpstreamError("; ".join(messages))
        raise UpstreamError(f"{response.status_code} - {response.text}")
