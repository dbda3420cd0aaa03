"""Core pipeline for Mutant Mint.

- **config.py**: Configuration management using Pydantic Settings
  (``MUTANTMINT_`` environment variables and ``.env``)
- **models.py**: Frozen records passed from one pipeline stage to the next
- **prompt_builder.py**: Creature and image prompt templates
- **errors.py**: Stage-tagged error taxonomy
- **pipeline.py**: :class:`MintPipeline`, the eight ordered stages
"""
