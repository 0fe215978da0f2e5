"""Createsend: Base Record Model.

Every record mirrors a remote JSON schema whose keys are PascalCase.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_pascal


class APIModel(BaseModel):
    """Flat data-transfer record with PascalCase wire names."""

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        extra="ignore",
    )

    def to_payload(self) -> dict:
        """Serialize as a request body. Fields left as None are omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
