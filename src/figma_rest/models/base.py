"""Base models for Figma API payloads."""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RestModel(BaseModel):
    """Payload whose JSON keys are snake_case (comments, users, library metadata).

    Unknown fields are ignored so that new API fields never break decoding.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    def to_dict(self) -> dict:
        """Return the JSON shape this model was decoded from."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class FigmaModel(RestModel):
    """Payload whose JSON keys are camelCase (document tree, file envelopes)."""

    model_config = ConfigDict(alias_generator=to_camel)
