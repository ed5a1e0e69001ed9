"""Pydantic models for entries returned by the delivery API."""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from cms_locale.retrieval.errors import DataShapeError

# sys keys that never reach projected records
STRIPPED_SYS_KEYS = ("space", "contentType")


class Entry(BaseModel):
    """A single entry fetched with locale=*."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    sys_block: Dict[str, Any] = Field(alias="sys")
    field_values: Dict[str, Dict[str, Any]] = Field(default_factory=dict, alias="fields")

    @field_validator("field_values", mode="before")
    @classmethod
    def _null_fields_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    @classmethod
    def from_item(cls, item: Any, position: int = 0) -> "Entry":
        """
        Validate one raw item from an entries response.

        A missing `fields` block is read as an entry with no values.

        Raises:
            DataShapeError: If the item is not a mapping, has no `sys`
                mapping, or carries non-mapping field values
        """
        if not isinstance(item, dict):
            raise DataShapeError(f"Entry at position {position} is not an object")
        try:
            return cls.model_validate(item)
        except ValidationError as e:
            entry_id = item.get("sys", {}).get("id") if isinstance(item.get("sys"), dict) else None
            raise DataShapeError(
                f"Malformed entry at position {position} (id={entry_id}): {e}"
            ) from e

    def stripped_sys(self) -> Dict[str, Any]:
        """sys metadata without space and contentType."""
        return {key: value for key, value in self.sys_block.items() if key not in STRIPPED_SYS_KEYS}


class EntryCollection(BaseModel):
    """Envelope of an entries response. Only `items` is read."""

    model_config = ConfigDict(extra="ignore")

    items: List[Any] = Field(default_factory=list)
    total: int = 0
    skip: int = 0
    limit: int = 0

    @classmethod
    def from_response(cls, payload: Any) -> "EntryCollection":
        if not isinstance(payload, dict) or "items" not in payload:
            raise DataShapeError("Entries response has no 'items' list")
        try:
            return cls.model_validate(payload)
        except ValidationError as e:
            raise DataShapeError(f"Malformed entries response: {e}") from e
