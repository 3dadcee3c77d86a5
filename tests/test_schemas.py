import pytest
from pydantic import ValidationError

from image_forge.schemas import GenerationRequest, ModelName, Style, first_error_message


def _error(payload):
    with pytest.raises(ValidationError) as excinfo:
        GenerationRequest.model_validate(payload)
    return first_error_message(excinfo.value)


def test_defaults():
    req = GenerationRequest.model_validate({"prompt": "a fox in a forest"})
    assert req.model is ModelName.FLUX
    assert req.style is Style.STORYBOOK
    assert req.steps is None
    assert req.negative_prompt is None


@pytest.mark.parametrize("payload", [{}, {"prompt": None}, {"prompt": "hi"}, {"prompt": "   ab   "}, {"prompt": 12345}])
def test_prompt_is_required(payload):
    assert _error(payload) == "prompt is required"


def test_prompt_error_wins_over_model_error():
    assert _error({"prompt": "", "model": "dalle"}) == "prompt is required"


@pytest.mark.parametrize("model", ["dalle", "FLUX", "", 3])
def test_unsupported_model(model):
    assert _error({"prompt": "a fox", "model": model}) == f"unsupported model: {model}"


def test_null_model_is_flux():
    assert GenerationRequest.model_validate({"prompt": "a fox", "model": None}).model is ModelName.FLUX


def test_sdxl_model():
    assert GenerationRequest.model_validate({"prompt": "a fox", "model": "sdxl"}).model is ModelName.SDXL


@pytest.mark.parametrize("style", ["watercolor", None, 7, ["animated3d"]])
def test_unknown_style_falls_back_to_storybook(style):
    assert GenerationRequest.model_validate({"prompt": "a fox", "style": style}).style is Style.STORYBOOK


def test_animated3d_style():
    assert GenerationRequest.model_validate({"prompt": "a fox", "style": "animated3d"}).style is Style.ANIMATED3D


def test_numeric_fields_are_kept_raw():
    req = GenerationRequest.model_validate({"prompt": "a fox", "steps": "lots", "guidance": -5, "width": 99999})
    assert req.steps == "lots"
    assert req.guidance == -5
    assert req.width == 99999


def test_non_string_negative_prompt_is_dropped():
    req = GenerationRequest.model_validate({"prompt": "a fox", "negative_prompt": ["blur"]})
    assert req.negative_prompt is None
