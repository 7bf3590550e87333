# src/community/models.py - v1
"""Option models for community detection and modularity scoring."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, field_validator

if TYPE_CHECKING:
    from graphlouvain.config.settings import Settings


class AttributeNames(BaseModel):
    """Names of the graph attributes read and written by the core."""

    weight: str = "weight"
    community: str = "community"

    @field_validator("weight", "community")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("attribute names must not be blank")
        return v


class LouvainOptions(BaseModel):
    """Execution options for louvain()."""

    attributes: AttributeNames = Field(default_factory=AttributeNames)
    # Altered-community pruning only skips provably useless candidates.
    prune_unaltered: bool = True

    @classmethod
    def from_settings(cls, settings: Settings) -> LouvainOptions:
        """Build options from loaded configuration."""
        return cls(
            attributes=AttributeNames(
                weight=settings.weight_attribute,
                community=settings.community_attribute,
            )
        )


class ModularityOptions(BaseModel):
    """Execution options for modularity()."""

    attributes: AttributeNames = Field(default_factory=AttributeNames)


def resolve_options(options: Any, model: type[BaseModel]) -> Any:
    """Merge caller options with defaults.

    Accepts None, an instance of ``model`` or a (possibly partial) nested
    dict such as ``{"attributes": {"community": "foo"}}``.
    """
    if options is None:
        return model()
    if isinstance(options, model):
        return options
    if isinstance(options, BaseModel):
        return model.model_validate(options.model_dump())
    return model.model_validate(options)
