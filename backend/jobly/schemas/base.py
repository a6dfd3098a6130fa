"""
base.py (schemas)
- Purpose: Shared pydantic config. API payloads use camelCase keys while
  Python code uses snake_case attributes.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CamelInput(CamelModel):
    """Request bodies: unknown keys (e.g. `handle` on PATCH) are rejected."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    def to_fields(self, *, partial: bool = False) -> dict:
        """camelCase dict for the services. `partial` keeps only keys the client sent."""
        return self.model_dump(by_alias=True, exclude_unset=partial, mode="json")
