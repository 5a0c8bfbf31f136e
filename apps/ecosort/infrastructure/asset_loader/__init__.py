"""Asset Loader."""

from ecosort.infrastructure.asset_loader.prompt_repository_impl import (
    FilePromptRepository,
)

__all__ = ["FilePromptRepository"]
