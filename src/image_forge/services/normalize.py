"""
Normalización de parámetros numéricos

Los valores numéricos del cuerpo de la petición no son de confianza. En lugar
de rechazarlos, se sustituyen por un valor por defecto cuando no son números
finitos y se saturan dentro de un rango fijo.
"""

import math
from typing import NamedTuple, Union

from image_forge.utils import is_finite_number

Number = Union[int, float]


class Bounds(NamedTuple):
    min: Number
    max: Number
    fallback: Number


FLUX_STEPS = Bounds(1, 8, 6)
SDXL_WIDTH = Bounds(256, 2048, 1344)
SDXL_HEIGHT = Bounds(256, 2048, 768)
SDXL_NUM_STEPS = Bounds(1, 20, 20)
SDXL_GUIDANCE = Bounds(1, 20, 7.5)


def round_half_up(value: Number) -> int:
    if isinstance(value, int):
        return value
    return int(math.floor(value + 0.5))


def clamp_int(value, min_value: int, max_value: int, fallback: int) -> int:
    v = round_half_up(value) if is_finite_number(value) else fallback
    return min(max_value, max(min_value, v))


def clamp_num(value, min_value: Number, max_value: Number, fallback: Number) -> Number:
    v = value if is_finite_number(value) else fallback
    return min(max_value, max(min_value, v))


def clamp_int_field(value, bounds: Bounds) -> int:
    return clamp_int(value, bounds.min, bounds.max, bounds.fallback)


def clamp_num_field(value, bounds: Bounds) -> Number:
    return clamp_num(value, bounds.min, bounds.max, bounds.fallback)


def normalize_seed(value):
    """Floors a numeric seed; anything else means "no seed"."""
    if not is_finite_number(value):
        return None
    return int(math.floor(value))
