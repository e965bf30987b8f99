"""
Pydantic base classes shared by colb's models.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ColbBaseModel(BaseModel):
    """Root of colb's models: unknown fields are rejected, values are not coerced."""

    model_config = ConfigDict(strict=True, extra="forbid")


class ImmutableModel(ColbBaseModel):
    """Frozen, hashable value.

    Package selections and run results are values of this kind; two
    instances with equal fields compare equal.
    """

    model_config = ConfigDict(strict=True, extra="forbid", frozen=True)
