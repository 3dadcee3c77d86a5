from image_forge.config import Settings
from image_forge.services.cors import (
    DEFAULT_ALLOWED_ORIGINS,
    compute_allowed_origins,
    cors_headers,
    parse_origin_list,
)


def test_defaults_only():
    assert compute_allowed_origins(Settings()) == DEFAULT_ALLOWED_ORIGINS


def test_config_adds_origins():
    settings = Settings(
        allowed_origin="  https://one.example  ",
        allowed_origins="https://two.example, ,https://three.example ,",
    )
    allowed = compute_allowed_origins(settings)
    assert {"https://one.example", "https://two.example", "https://three.example"} <= allowed
    assert "" not in allowed
    assert DEFAULT_ALLOWED_ORIGINS <= allowed


def test_blank_single_origin_is_ignored():
    assert compute_allowed_origins(Settings(allowed_origin="   ")) == DEFAULT_ALLOWED_ORIGINS


def test_parse_origin_list():
    assert parse_origin_list(None) == set()
    assert parse_origin_list(" , ") == set()
    assert parse_origin_list("a,b") == {"a", "b"}


def test_allowed_origin_is_echoed():
    headers = cors_headers("http://localhost:8080", DEFAULT_ALLOWED_ORIGINS)
    assert headers["Access-Control-Allow-Origin"] == "http://localhost:8080"
    assert headers["Vary"] == "Origin"


def test_unknown_origin_gets_no_allow_origin():
    for origin in ("https://evil.example", "", None, "http://localhost:8080/", "HTTP://LOCALHOST:8080"):
        headers = cors_headers(origin, DEFAULT_ALLOWED_ORIGINS)
        assert "Access-Control-Allow-Origin" not in headers
        assert headers["Vary"] == "Origin"


def test_static_cors_headers():
    headers = cors_headers(None, DEFAULT_ALLOWED_ORIGINS)
    assert headers["Access-Control-Allow-Methods"] == "POST, OPTIONS"
    assert headers["Access-Control-Allow-Headers"] == "Content-Type, Authorization"
    assert headers["Access-Control-Max-Age"] == "86400"
    exposed = headers["Access-Control-Expose-Headers"]
    for name in ("X-Model", "X-Steps", "X-Style", "X-Num-Steps", "X-Guidance", "X-Prompt-Chars"):
        assert name in exposed
