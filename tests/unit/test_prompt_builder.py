"""Tests for mutantmint.core.prompt_builder — creature and image prompts."""

from __future__ import annotations

from mutantmint.core.models import GeneratedDescription
from mutantmint.core.prompt_builder import (
    IMAGE_PROMPT_SUFFIX,
    build_creature_prompt,
    build_image_prompt,
    normalize_subject,
)


class TestBuildCreaturePrompt:
    """Test single-subject and fusion prompt selection."""

    def test_single_subject(self):
        prompt = build_creature_prompt("frog")
        assert prompt.is_fusion is False
        assert prompt.subjects == ("frog",)
        assert "surreal version of a frog" in prompt.text

    def test_fusion(self):
        prompt = build_creature_prompt("cat", "octopus")
        assert prompt.is_fusion is True
        assert prompt.subjects == ("cat", "octopus")
        assert "mutant fusion of a cat and a octopus" in prompt.text

    def test_both_templates_request_realism(self):
        for prompt in (build_creature_prompt("frog"), build_creature_prompt("cat", "octopus")):
            assert "Photorealistic" in prompt.text
            assert "cinematic lighting" in prompt.text
            assert "realistic anatomy" in prompt.text

    def test_subjects_are_stripped(self):
        prompt = build_creature_prompt("  cat ", " octopus  ")
        assert prompt.subjects == ("cat", "octopus")
        assert "a cat and a octopus" in prompt.text

    def test_blank_secondary_is_single(self):
        prompt = build_creature_prompt("frog", "   ")
        assert prompt.is_fusion is False
        assert prompt.subjects == ("frog",)

    def test_single_prompt_names_one_subject(self):
        """A single-subject prompt should only name its subject once."""
        prompt = build_creature_prompt("axolotl")
        assert prompt.text.count("axolotl") == 1


class TestBuildImagePrompt:
    def test_suffix_appended(self):
        image_prompt = build_image_prompt(GeneratedDescription(text="a warty hybrid"))
        assert image_prompt.text == "a warty hybrid" + IMAGE_PROMPT_SUFFIX

    def test_suffix_content(self):
        assert "8K resolution" in IMAGE_PROMPT_SUFFIX
        assert "no text" in IMAGE_PROMPT_SUFFIX
        assert IMAGE_PROMPT_SUFFIX.rstrip().endswith("pure creature realism.")


class TestNormalizeSubject:
    def test_none(self):
        assert normalize_subject(None) is None

    def test_blank(self):
        assert normalize_subject("  \t") is None

    def test_strip(self):
        assert normalize_subject(" frog ") == "frog"
