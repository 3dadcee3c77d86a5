"""
Servicios de procesamiento de imágenes

Comprueba los bytes que devuelve el modelo antes de enviarlos al cliente.

Características:
- Decodificación de imágenes en base64
- Verificación de que el resultado es una imagen legible por Pillow
"""

from io import BytesIO

from PIL import Image, UnidentifiedImageError

from image_forge.utils import decode_b64_image
from image_forge.workers_ai import NoImageError


def ensure_image_bytes(img_bytes) -> bytes:
    """Returns `img_bytes` if they hold a readable image, else raises NoImageError."""
    if not isinstance(img_bytes, (bytes, bytearray)) or not img_bytes:
        raise NoImageError()
    try:
        with Image.open(BytesIO(img_bytes)) as img:
            img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as e:
        raise NoImageError() from e
    return bytes(img_bytes)


def image_from_b64(img_b64) -> bytes:
    if not isinstance(img_b64, str) or not img_b64:
        raise NoImageError()
    try:
        img_bytes = decode_b64_image(img_b64)
    except ValueError as e:
        raise NoImageError() from e
    return ensure_image_bytes(img_bytes)
