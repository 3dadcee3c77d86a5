"""
Modelos de datos y validación

Define los esquemas Pydantic utilizados para:
- Validar el cuerpo de POST /api/generate
- Normalizar modelo y estilo a sus valores admitidos

Los campos numéricos se aceptan tal cual llegan; su saneado (valor por defecto
y saturación) se hace en `image_forge.services.normalize`.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

MIN_PROMPT_CHARS = 3


class ModelName(str, Enum):
    FLUX = "flux"
    SDXL = "sdxl"


class Style(str, Enum):
    STORYBOOK = "storybook"
    ANIMATED3D = "animated3d"


class GenerationRequest(BaseModel):
    prompt: str = Field(default=None, validate_default=True)
    model: ModelName = ModelName.FLUX
    style: Style = Style.STORYBOOK

    # flux
    steps: Any = None
    seed: Any = None

    # sdxl
    width: Any = None
    height: Any = None
    num_steps: Any = None
    guidance: Any = None
    negative_prompt: Optional[str] = None

    @field_validator("prompt", mode="before")
    @classmethod
    def prompt_is_required(cls, value):
        if not isinstance(value, str) or len(value.strip()) < MIN_PROMPT_CHARS:
            raise PydanticCustomError("prompt_required", "prompt is required")
        return value

    @field_validator("model", mode="before")
    @classmethod
    def known_model(cls, value):
        if value is None:
            return ModelName.FLUX
        if not isinstance(value, str) or value not in {m.value for m in ModelName}:
            raise PydanticCustomError(
                "unsupported_model", "unsupported model: {model}", {"model": str(value)}
            )
        return value

    @field_validator("style", mode="before")
    @classmethod
    def known_style_or_default(cls, value):
        if isinstance(value, str) and value in {s.value for s in Style}:
            return value
        return Style.STORYBOOK

    @field_validator("negative_prompt", mode="before")
    @classmethod
    def text_or_none(cls, value):
        return value if isinstance(value, str) and value else None


def first_error_message(error: ValidationError) -> str:
    errors = error.errors()
    return errors[0]["msg"] if errors else "Invalid request"
