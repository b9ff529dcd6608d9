"""Base model class for all rgsnapshot models with serialization support."""

from typing import Any, Dict
from pydantic import BaseModel, ConfigDict


class SnapshotBaseModel(BaseModel):
    """Base model for all rgsnapshot models.

    Models are frozen: every record in this package is created once per
    collection run and never mutated afterwards. Fields that carry an
    externally visible wire name declare it as an alias; both names are
    accepted on input.
    """
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        use_enum_values=True,
    )

    def to_dict(self) -> Dict[str, Any]:
        """Convert model to a JSON-compatible dictionary using wire names."""
        return self.model_dump(mode="json", by_alias=True)
