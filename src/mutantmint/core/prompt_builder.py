"""Creature prompt templates for the mint pipeline.

Two prompts are built per request:

1. The **creature prompt** sent to the text model.  With two subjects it asks
   for a mutant fusion of both; with one it asks for a surreal variant.
2. The **image prompt** sent to the image model: the generated description
   followed by a fixed realism suffix.

Usage
-----
::

    prompt = build_creature_prompt("cat", "octopus")
    image_prompt = build_image_prompt("A cat with eight velvet tentacles.")
"""

from __future__ import annotations

from mutantmint.core.models import CreaturePrompt, GeneratedDescription, ImagePrompt

# ---------------------------------------------------------------------------
# Fixed template fragments.
# ---------------------------------------------------------------------------

_STYLE_TAIL = (
    "Photorealistic, cinematic lighting, realistic anatomy, surreal elements."
)

_FUSION_TEMPLATE = (
    "Create a wild, hyper-realistic, ultra-detailed mutant fusion of a {primary} "
    "and a {secondary}. " + _STYLE_TAIL
)

_SINGLE_TEMPLATE = (
    "Create a wild, hyper-realistic, ultra-detailed surreal version of a {primary}. "
    + _STYLE_TAIL
)

IMAGE_PROMPT_SUFFIX = (
    " Ultra-detailed hyper-realistic creature portrait in 8K resolution, "
    "cinematic lighting, no text, no words, no letters, pure creature realism."
)


def normalize_subject(value: str | None) -> str | None:
    """Strip a subject name, mapping blank values to ``None``."""
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def build_creature_prompt(primary: str, secondary: str | None = None) -> CreaturePrompt:
    """Build the text-generation prompt for one or two subjects.

    Args:
        primary: The main animal.  Must be non-blank (validated upstream).
        secondary: Optional second animal.  A blank value is treated as
            absent and yields the single-subject prompt.

    Returns:
        The prompt text together with the subjects it names.
    """
    primary = primary.strip()
    secondary = normalize_subject(secondary)

    if secondary:
        text = _FUSION_TEMPLATE.format(primary=primary, secondary=secondary)
        return CreaturePrompt(text=text, subjects=(primary, secondary), is_fusion=True)

    text = _SINGLE_TEMPLATE.format(primary=primary)
    return CreaturePrompt(text=text, subjects=(primary,), is_fusion=False)


def build_image_prompt(description: GeneratedDescription) -> ImagePrompt:
    """Append the fixed realism suffix to a generated description."""
    return ImagePrompt(text=description.text + IMAGE_PROMPT_SUFFIX)
