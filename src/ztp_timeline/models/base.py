"""Pydantic base classes shared by every ztp-timeline model.

Strings are whitespace-stripped on input, since names and descriptions
come straight from ``oc`` JSON and assisted-service payloads.
"""

from pydantic import BaseModel, ConfigDict

__all__ = ["BaseSchema", "FrozenSchema"]


class BaseSchema(BaseModel):
    """Mutable model base: derived and report models."""

    model_config = ConfigDict(
        from_attributes=True,
        str_strip_whitespace=True,
    )


class FrozenSchema(BaseSchema):
    """Immutable model base: records and resolved anchors."""

    model_config = ConfigDict(
        from_attributes=True,
        str_strip_whitespace=True,
        frozen=True,
    )
