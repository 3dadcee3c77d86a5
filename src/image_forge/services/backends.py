"""
Perfiles de backend

Cada perfil sabe qué modelo de Workers AI ejecuta, cómo construir sus
parámetros a partir de la petición, cómo convertir su resultado en bytes de
imagen y qué cabeceras de diagnóstico acompañan a la respuesta.

- flux: rápido, pocos pasos, sin negative prompt; devuelve la imagen en base64
- sdxl: más control (tamaño, guidance, negative prompt); devuelve bytes
"""

from image_forge.schemas import GenerationRequest, ModelName
from image_forge.services.images import ensure_image_bytes, image_from_b64
from image_forge.services.normalize import (
    FLUX_STEPS,
    SDXL_GUIDANCE,
    SDXL_HEIGHT,
    SDXL_NUM_STEPS,
    SDXL_WIDTH,
    clamp_int_field,
    clamp_num_field,
    normalize_seed,
)
from image_forge.services.prompts import compose_negative_prompt
from image_forge.utils import format_header_number
from image_forge.workers_ai import NoImageError, WorkersAIClient


class BackendProfile:
    model_id: str = ""
    label: str = ""

    def build_inputs(self, req: GenerationRequest, prompt: str) -> dict:
        raise NotImplementedError

    def invoke(self, client: WorkersAIClient, inputs: dict) -> bytes:
        raise NotImplementedError

    def diagnostic_headers(self, inputs: dict) -> dict:
        raise NotImplementedError

    @staticmethod
    def _with_seed(inputs: dict, req: GenerationRequest) -> dict:
        seed = normalize_seed(req.seed)
        if seed is not None:
            inputs["seed"] = seed
        return inputs


class FluxProfile(BackendProfile):
    model_id = "@cf/black-forest-labs/flux-1-schnell"
    label = "flux-1-schnell"

    def build_inputs(self, req: GenerationRequest, prompt: str) -> dict:
        inputs = {"prompt": prompt, "steps": clamp_int_field(req.steps, FLUX_STEPS)}
        return self._with_seed(inputs, req)

    def invoke(self, client: WorkersAIClient, inputs: dict) -> bytes:
        result = client.run(self.model_id, inputs)
        if not isinstance(result, dict):
            raise NoImageError()
        return image_from_b64(result.get("image"))

    def diagnostic_headers(self, inputs: dict) -> dict:
        return {"X-Model": self.label, "X-Steps": str(inputs["steps"])}


class SdxlProfile(BackendProfile):
    model_id = "@cf/stabilityai/stable-diffusion-xl-base-1.0"
    label = "sdxl-base-1.0"

    def build_inputs(self, req: GenerationRequest, prompt: str) -> dict:
        inputs = {
            "prompt": prompt,
            "negative_prompt": compose_negative_prompt(req.negative_prompt),
            "width": clamp_int_field(req.width, SDXL_WIDTH),
            "height": clamp_int_field(req.height, SDXL_HEIGHT),
            "num_steps": clamp_int_field(req.num_steps, SDXL_NUM_STEPS),
            "guidance": clamp_num_field(req.guidance, SDXL_GUIDANCE),
        }
        return self._with_seed(inputs, req)

    def invoke(self, client: WorkersAIClient, inputs: dict) -> bytes:
        return ensure_image_bytes(client.run(self.model_id, inputs))

    def diagnostic_headers(self, inputs: dict) -> dict:
        return {
            "X-Model": self.label,
            "X-Num-Steps": str(inputs["num_steps"]),
            "X-Guidance": format_header_number(inputs["guidance"]),
        }


PROFILES = {
    ModelName.FLUX: FluxProfile(),
    ModelName.SDXL: SdxlProfile(),
}


def get_profile(model: ModelName) -> BackendProfile:
    return PROFILES[model]
