import base64

import pytest

from image_forge.utils import (
    decode_b64_image,
    format_header_number,
    is_finite_number,
    remove_b64_header,
)


def test_remove_b64_header():
    data_url = "data:image/png;base64,iVBORw0KGgoAAAANSUhEUgAAAAUA"
    result = remove_b64_header(data_url)
    assert result.startswith("iVBORw0KGgoAAAANSUhEUgAAAAUA")
    assert len(result) % 4 == 0

    assert remove_b64_header("aGVsbG8=") == "aGVsbG8="
    assert remove_b64_header("aGVs\nbG8") == "aGVsbG8="


def test_decode_b64_image():
    raw = b"\xff\xd8\xff\xe0 jpeg-ish"
    encoded = base64.b64encode(raw).decode("ascii")
    assert decode_b64_image(encoded) == raw
    assert decode_b64_image(f"data:image/jpeg;base64,{encoded}") == raw


def test_decode_b64_image_rejects_garbage():
    with pytest.raises(ValueError):
        decode_b64_image("not base64 at all!!")


def test_is_finite_number():
    assert is_finite_number(3)
    assert is_finite_number(2.5)
    assert not is_finite_number(float("nan"))
    assert not is_finite_number(float("inf"))
    assert not is_finite_number(True)
    assert not is_finite_number("7")
    assert not is_finite_number(None)


def test_format_header_number():
    assert format_header_number(7.5) == "7.5"
    assert format_header_number(20.0) == "20"
    assert format_header_number(1) == "1"
