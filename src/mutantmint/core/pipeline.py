"""The eight-stage mint pipeline.

:class:`MintPipeline` is the single point of control for turning one or two
animal names into a minted NFT.  Each stage is a method that takes the
previous stage's typed output and returns its own:

=====  ===========================  ======================  =====================
Step   Method                       Input                   Output
=====  ===========================  ======================  =====================
1      ``build_creature_prompt``    subjects                :class:`CreaturePrompt`
2      :meth:`describe`             CreaturePrompt          :class:`GeneratedDescription`
3      ``build_image_prompt``       GeneratedDescription    :class:`ImagePrompt`
4      :meth:`render`               ImagePrompt             :class:`GeneratedImage`
5      :meth:`download`             GeneratedImage          :class:`ImageAsset`
6      :meth:`pin_image`            ImageAsset              :class:`PinnedContent`
7      :meth:`build_metadata`,      PinnedContent           :class:`MetadataRecord`,
       :meth:`pin_metadata`                                 :class:`PinnedContent`
8      :meth:`mint`                 PinnedContent           :class:`MintReceipt`
=====  ===========================  ======================  =====================

Stages run strictly in order and the first failure aborts the run, so no
collaborator is called after an upstream stage has failed.  Content that was
already pinned when a later stage fails is logged but not unpinned.

Usage
-----
::

    pipeline = MintPipeline(
        generator=OpenAIGenerator.from_config(config),
        fetcher=ImageFetcher(),
        pinner=PinataClient.from_config(config),
        minter=ContractMinter.from_config(config),
    )
    result = pipeline.run("cat", "octopus")
"""

from __future__ import annotations

import logging
import random

from mutantmint.core.errors import ChainTransactionError, ValidationError
from mutantmint.core.models import (
    CreaturePrompt,
    GeneratedDescription,
    GeneratedImage,
    ImageAsset,
    ImagePrompt,
    MetadataRecord,
    MintReceipt,
    MintResult,
    PinnedContent,
)
from mutantmint.core.prompt_builder import (
    build_creature_prompt,
    build_image_prompt,
    normalize_subject,
)
from mutantmint.services.contract import ContractMinter
from mutantmint.services.fetcher import ImageFetcher
from mutantmint.services.openai_service import OpenAIGenerator
from mutantmint.services.pinata import PinataClient

logger = logging.getLogger(__name__)

# Fixed token description.  It names DALL·E 3 whatever MUTANTMINT_IMAGE_MODEL
# is set to; existing tokens carry this exact text.
METADATA_DESCRIPTION = "A hyper-realistic AI-generated mutant creature using OpenAI DALL·E 3."

# Shared by the subject check and the malformed-body handler.
MISSING_PRIMARY_MESSAGE = "Please provide at least primarySubject!"

# Upper bound (exclusive) of the random number in the display name.  The
# number is not checked for uniqueness.
NAME_ID_RANGE = 1_000_000


def validate_subjects(primary: str | None, secondary: str | None = None) -> tuple[str, str | None]:
    """Normalise the request subjects.

    Returns:
        ``(primary, secondary)`` stripped, with a blank secondary mapped to
        ``None``.

    Raises:
        ValidationError: If the primary subject is missing or blank.
    """
    primary = normalize_subject(primary)
    if primary is None:
        raise ValidationError(MISSING_PRIMARY_MESSAGE)
    return primary, normalize_subject(secondary)


class MintPipeline:
    """Runs the mint stages against injected collaborators.

    Attributes:
        _generator: Text and image generation service.
        _fetcher: Downloads the generated image.
        _pinner: Pins the image and the metadata document.
        _minter: Submits the mint transaction.
        _rng: Source of the display-name number.
    """

    def __init__(
        self,
        generator: OpenAIGenerator,
        fetcher: ImageFetcher,
        pinner: PinataClient,
        minter: ContractMinter,
        *,
        name_prefix: str = "Brainrot Animal",
        rng: random.Random | None = None,
    ) -> None:
        self._generator = generator
        self._fetcher = fetcher
        self._pinner = pinner
        self._minter = minter
        self._name_prefix = name_prefix
        self._rng = rng or random.Random()

    # -- Stages -------------------------------------------------------------

    def describe(self, prompt: CreaturePrompt) -> GeneratedDescription:
        description = self._generator.describe(prompt)
        logger.info("Creature description: %s", description.text)
        return description

    def render(self, prompt: ImagePrompt) -> GeneratedImage:
        image = self._generator.render(prompt)
        logger.info("Image generated: %s", image.url)
        return image

    def download(self, image: GeneratedImage) -> ImageAsset:
        return self._fetcher.download(image)

    def pin_image(self, asset: ImageAsset) -> PinnedContent:
        pinned = self._pinner.pin_file(asset)
        logger.info("Image pinned: %s", pinned.uri)
        return pinned

    def build_metadata(self, image: PinnedContent) -> MetadataRecord:
        """Build the token metadata around the pinned image address."""
        number = self._rng.randrange(NAME_ID_RANGE)
        return MetadataRecord(
            name=f"{self._name_prefix} #{number}",
            description=METADATA_DESCRIPTION,
            image=image.uri,
        )

    def pin_metadata(self, record: MetadataRecord) -> PinnedContent:
        pinned = self._pinner.pin_json(record.to_dict())
        logger.info("Metadata pinned: %s", pinned.uri)
        return pinned

    def mint(self, metadata: PinnedContent) -> MintReceipt:
        receipt = self._minter.mint(metadata.uri)
        logger.info("NFT minted, tx hash: %s", receipt.transaction_hash)
        return receipt

    # -- Orchestration ------------------------------------------------------

    def run(self, primary: str | None, secondary: str | None = None) -> MintResult:
        """Run every stage in order and summarise the outcome.

        Args:
            primary: Required subject name.
            secondary: Optional second subject; when present the creature
                is a fusion of both.

        Returns:
            The summary of the minted token.

        Raises:
            ValidationError: If ``primary`` is missing or blank.  Raised
                before any collaborator is called.
            PipelineError: The tagged error of the first failing stage.
        """
        primary, secondary = validate_subjects(primary, secondary)
        logger.info(
            "Minting creature for %s%s", primary, f" and {secondary}" if secondary else ""
        )

        prompt = build_creature_prompt(primary, secondary)
        description = self.describe(prompt)
        image = self.render(build_image_prompt(description))
        asset = self.download(image)
        pinned_image = self.pin_image(asset)
        pinned_metadata = self.pin_metadata(self.build_metadata(pinned_image))

        try:
            receipt = self.mint(pinned_metadata)
        except ChainTransactionError:
            logger.warning(
                "Mint failed; pinned content left orphaned: image=%s metadata=%s",
                pinned_image.uri,
                pinned_metadata.uri,
            )
            raise

        return MintResult(
            primary_subject=primary,
            secondary_subject=secondary,
            description=description.text,
            image_uri=pinned_image.uri,
            metadata_uri=pinned_metadata.uri,
            transaction_hash=receipt.transaction_hash,
        )

    def close(self) -> None:
        """Close the HTTP clients held by the collaborators."""
        self._generator.close()
        self._fetcher.close()
        self._pinner.close()
