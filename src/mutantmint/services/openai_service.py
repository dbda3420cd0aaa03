"""OpenAI text and image generation for the mint pipeline.

:class:`OpenAIGenerator` wraps a single ``openai.OpenAI`` client and exposes
the two generation steps of the pipeline:

- :meth:`~OpenAIGenerator.describe`: single-turn chat completion that turns
  the creature prompt into a description.
- :meth:`~OpenAIGenerator.render`: image generation that turns the image
  prompt into a provider-hosted URL.

Both methods translate every ``openai.OpenAIError`` (and malformed or empty
responses) into :class:`~mutantmint.core.errors.UpstreamGenerationError`.
Retries are left to the client library's own ``max_retries`` handling.
"""

from __future__ import annotations

import logging

from openai import OpenAI, OpenAIError

from mutantmint.core.config import MintConfig
from mutantmint.core.errors import UpstreamGenerationError
from mutantmint.core.models import (
    CreaturePrompt,
    GeneratedDescription,
    GeneratedImage,
    ImagePrompt,
)

logger = logging.getLogger(__name__)


class OpenAIGenerator:
    """Text and image generation backed by the OpenAI API.

    Args:
        client: Configured ``OpenAI`` client instance.
        text_model: Chat completion model name.
        image_model: Image generation model name.
        image_size: Square resolution string (e.g. ``"1024x1024"``).
    """

    def __init__(
        self,
        client: OpenAI,
        *,
        text_model: str = "gpt-4",
        image_model: str = "dall-e-3",
        image_size: str = "1024x1024",
    ) -> None:
        self._client = client
        self._text_model = text_model
        self._image_model = image_model
        self._image_size = image_size

    @classmethod
    def from_config(cls, config: MintConfig) -> OpenAIGenerator:
        """Build a generator from application configuration.

        Raises:
            ValueError: If the API key is not configured.
        """
        config.require("openai_api_key")
        client = OpenAI(api_key=config.openai_api_key.get_secret_value())
        return cls(
            client,
            text_model=config.text_model,
            image_model=config.image_model,
            image_size=config.image_size,
        )

    def describe(self, prompt: CreaturePrompt) -> GeneratedDescription:
        """Elaborate the creature prompt into a free-text description.

        Args:
            prompt: Prompt built from the request subjects.

        Returns:
            Content of the first returned choice.

        Raises:
            UpstreamGenerationError: On API failure or when no usable
                choice is returned.
        """
        try:
            completion = self._client.chat.completions.create(
                model=self._text_model,
                messages=[{"role": "user", "content": prompt.text}],
            )
        except OpenAIError as e:
            raise UpstreamGenerationError(
                f"Text generation failed: {e}", stage="text_generation"
            ) from e

        if not completion.choices:
            raise UpstreamGenerationError(
                "Text generation returned no choices", stage="text_generation"
            )

        content = completion.choices[0].message.content
        if not content or not content.strip():
            raise UpstreamGenerationError(
                "Text generation returned an empty description", stage="text_generation"
            )

        return GeneratedDescription(text=content)

    def render(self, prompt: ImagePrompt) -> GeneratedImage:
        """Generate exactly one square image for the prompt.

        Args:
            prompt: Description plus realism suffix.

        Returns:
            The provider-hosted URL of the generated image.

        Raises:
            UpstreamGenerationError: On API failure or when the response
                contains no image URL.
        """
        try:
            response = self._client.images.generate(
                model=self._image_model,
                prompt=prompt.text,
                n=1,
                size=self._image_size,
            )
        except OpenAIError as e:
            raise UpstreamGenerationError(
                f"Image generation failed: {e}", stage="image_generation"
            ) from e

        if not response.data:
            raise UpstreamGenerationError(
                "Image generation returned no images", stage="image_generation"
            )

        url = response.data[0].url
        if not url:
            raise UpstreamGenerationError(
                "Image generation returned no URL", stage="image_generation"
            )

        logger.debug("Image generated at %s", url)
        return GeneratedImage(url=url)

    def close(self) -> None:
        """Close the OpenAI client's HTTP connection pool."""
        self._client.close()
