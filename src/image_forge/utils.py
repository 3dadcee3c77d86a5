import base64
import binascii
import math


def remove_b64_header(data):
    """
    Remove the base64 header from a data URL and restore missing padding.
    """
    if data.startswith("data:image/"):
        data = data.split(",", 1)[-1]
    img_b64 = "".join(data.split())
    padding = len(img_b64) % 4
    if padding:
        img_b64 += "=" * (4 - padding)
    return img_b64


def decode_b64_image(data: str) -> bytes:
    """
    Decode a base64 (or data URL) image string into raw bytes.
    Raises ValueError when the payload is not valid base64.
    """
    try:
        return base64.b64decode(remove_b64_header(data), validate=True)
    except binascii.Error as e:
        raise ValueError(f"invalid base64 image: {e}") from e


def is_finite_number(value) -> bool:
    # bool is an int subclass but JSON true/false are not numbers
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return isinstance(value, int) or math.isfinite(value)


def format_header_number(value) -> str:
    """
    Render a number for a response header: 7.5 -> "7.5", 20.0 -> "20".
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
