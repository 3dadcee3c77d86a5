"""
Servicios de generación de imágenes

Implementa la lógica de la aplicación relacionada con la generación de imágenes
a través de Workers AI, actuando como capa intermedia entre el endpoint
de la API y el cliente de Workers AI.

Responsabilidades:
- Componer el prompt final y elegir el perfil de backend
- Ejecutar el modelo fuera del event loop
- Traducir los fallos del modelo a respuestas 502
- Devolver los bytes de la imagen junto con las cabeceras de diagnóstico
"""

import logging
import time
from dataclasses import dataclass, field

from fastapi import HTTPException
from fastapi.concurrency import run_in_threadpool

from image_forge.schemas import GenerationRequest
from image_forge.services.backends import get_profile
from image_forge.services.prompts import compose_prompt
from image_forge.workers_ai import NoImageError, WorkersAIClient

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    image: bytes
    headers: dict = field(default_factory=dict)


async def generate_image(client: WorkersAIClient, req: GenerationRequest) -> GenerationResult:
    prompt = compose_prompt(req.prompt, req.style.value)
    profile = get_profile(req.model)
    inputs = profile.build_inputs(req, prompt)

    started = time.monotonic()
    try:
        image = await run_in_threadpool(profile.invoke, client, inputs)
    except NoImageError as e:
        logger.warning("%s returned no usable image", profile.label)
        raise HTTPException(status_code=502, detail=str(e)) from e
    except Exception as e:
        msg = str(e) or "AI run error"
        logger.warning("%s failed: %s", profile.label, msg)
        raise HTTPException(status_code=502, detail=f"Upstream AI error: {msg}") from e

    logger.info(
        "Generated image with %s style=%s prompt_chars=%d bytes=%d in %.2fs",
        profile.label,
        req.style.value,
        len(prompt),
        len(image),
        time.monotonic() - started,
    )

    headers = profile.diagnostic_headers(inputs)
    headers["X-Style"] = req.style.value
    headers["X-Prompt-Chars"] = str(len(prompt))
    return GenerationResult(image=image, headers=headers)
