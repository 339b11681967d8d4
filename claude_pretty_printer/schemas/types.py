"""
Shared type definitions for schemas.

Centralizes the base models and union helpers used by the record schemas.

Layering:
- This module provides FOUNDATION types (BaseStrictModel, PermissiveModel, fallback discriminators)
- records.py, streaming.py and hooks.py import from here
"""

from __future__ import annotations

from collections.abc import Collection
from typing import Any

import pydantic

# ==============================================================================
# Base Strict Model (Foundation)
# ==============================================================================


class BaseStrictModel(pydantic.BaseModel):
    """
    Foundation strict model for values we construct ourselves.

    Uses extra='forbid' to reject unknown fields - any field not modeled
    causes immediate validation failure (fail-fast).
    """

    model_config = pydantic.ConfigDict(
        extra='forbid',  # Reject unknown fields (fail-fast)
        strict=True,  # Strict type coercion
        frozen=True,  # Immutable after creation
    )


# ==============================================================================
# Permissive Model (Foundation)
# ==============================================================================


class PermissiveModel(pydantic.BaseModel):
    """
    Foundation permissive model for records emitted by the agent runtime.

    Symmetry with BaseStrictModel:
    - BaseStrictModel: extra='forbid' (rejects unknown fields)
    - PermissiveModel: extra='allow' (accepts unknown fields)

    The runtime adds fields between releases, so wire records keep whatever
    they are given and only the fields we render are typed. Coercion is lax
    because JSON numbers arrive as int or float interchangeably.
    """

    model_config = pydantic.ConfigDict(
        extra='allow',  # Accept unknown fields (graceful fallback)
        strict=False,
        frozen=True,  # Immutable after creation
    )

    def get_extra_fields(self) -> dict[str, object]:
        """Get extra fields captured by this permissive model.

        Returns only the unknown fields, not defined model fields.
        Hook-response records carry their lifecycle payload here.
        """
        return dict(self.__pydantic_extra__) if self.__pydantic_extra__ else {}


# ==============================================================================
# Fallback Discriminators
# ==============================================================================
#
# pydantic's Field(discriminator=...) rejects unknown tags. Records from the
# runtime grow new tags over time, so every union here uses a callable
# Discriminator that maps unknown tags onto an explicit fallback member:
#
#     ContentBlock = Annotated[
#         Annotated[TextBlock, pydantic.Tag('text')]
#         | Annotated[UnknownBlock, pydantic.Tag(FALLBACK_TAG)],
#         fallback_discriminator('type', {'text'}),
#     ]
# ==============================================================================

FALLBACK_TAG = 'unknown'
STRING_TAG = 'string'


def read_tag(value: Any, field: str) -> Any:
    """Read a tag field from raw input (dict) or an already-built model."""
    if isinstance(value, dict):
        return value.get(field)
    return getattr(value, field, None)


def fallback_discriminator(field: str, known: Collection[str], allow_strings: bool = False) -> pydantic.Discriminator:
    """Build a Discriminator that routes unknown tags to FALLBACK_TAG.

    Args:
        field: Name of the tag field (e.g. 'type', 'subtype')
        known: Tags that have a dedicated union member
        allow_strings: Route bare strings to STRING_TAG (user content arrays)
    """
    known_tags = frozenset(known)

    def discriminate(value: Any) -> str:
        if allow_strings and isinstance(value, str):
            return STRING_TAG
        tag = read_tag(value, field)
        if isinstance(tag, str) and tag in known_tags:
            return tag
        return FALLBACK_TAG

    return pydantic.Discriminator(discriminate)
