"""
Composición del prompt final

Construye el texto que se envía al modelo a partir del prompt del usuario:
- Añade cláusulas fijas de composición, estilo, anti-texto y seguridad
- Limita el resultado a MAX_PROMPT_CHARS conservando el final

Las cláusulas de seguridad y anti-texto van al final del prompt, así que un
prompt demasiado largo se recorta por el principio.
"""

MAX_PROMPT_CHARS = 2048

# FLUX has no negative prompt, text suppression has to live here.
ANTI_TEXT = (
    "ABSOLUTELY NO TEXT: no letters, no words, no numbers, no symbols, no signage, no labels, no captions, "
    "no book covers with titles, no misspellings, no gibberish. "
    "If any sign, poster, menu, label, packaging, screen, or book spine appears, it must be BLANK and UNREADABLE. "
    "No logos, no watermark, no signature."
)

AVOID_TEXT_PROPS = (
    "Avoid text-bearing elements: posters, banners, street signs, storefront signs, menus, UI screens, labels, packaging, "
    "newspapers, magazines, chalkboards, whiteboards, license plates, book spines with titles. "
    "Prefer plain surfaces and simple shapes."
)

CROP_SAFE = (
    "Keep key subjects centered with generous margins; avoid important details near edges (crop-safe 16:9)."
)

BASE_SAFETY = "Family-friendly. Natural proportions. No gore. No violence. No weapons. No horror imagery."

STYLE_CLAUSES = {
    "storybook": (
        "Storybook illustration, warm cinematic lighting, clean composition, soft depth of field, high detail."
    ),
    "animated3d": (
        "High-quality 3D animated family film look, soft global illumination, warm rim light, detailed materials, "
        "subtle subsurface scattering, clean shapes, cinematic depth of field, sharp focus on subject, "
        "ultra clean render."
    ),
}

DEFAULT_STYLE = "storybook"

NEGATIVE_PROMPT = (
    "text, letters, words, typography, caption, subtitle, title, logo, watermark, signature, "
    "signage, street sign, label, menu, poster, banner, book cover text, misspelling, gibberish, "
    "license plate, UI, screen text, packaging text, "
    "low quality, blurry, grain, noise, deformed, malformed hands, extra fingers"
)


def truncate_tail(text: str, max_chars: int = MAX_PROMPT_CHARS) -> str:
    """Keep the last `max_chars` characters of `text`."""
    if len(text) <= max_chars:
        return text
    return text[len(text) - max_chars:]


def style_clause(style: str) -> str:
    return STYLE_CLAUSES.get(style, STYLE_CLAUSES[DEFAULT_STYLE])


def build_full_prompt(user_prompt: str, style: str) -> str:
    """The untruncated prompt: user text, a blank line, then one clause per line."""
    clauses = [CROP_SAFE, style_clause(style), ANTI_TEXT, AVOID_TEXT_PROPS, BASE_SAFETY]
    return user_prompt.strip() + "\n\n" + "\n".join(clauses)


def compose_prompt(user_prompt: str, style: str = DEFAULT_STYLE) -> str:
    return truncate_tail(build_full_prompt(user_prompt, style))


def compose_negative_prompt(user_negative=None) -> str:
    """Caller negatives first, the built-in list last so truncation never drops it."""
    if isinstance(user_negative, str) and user_negative.strip():
        return truncate_tail(f"{user_negative}, {NEGATIVE_PROMPT}")
    return NEGATIVE_PROMPT
