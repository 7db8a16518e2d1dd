"""Shared pydantic base for aslan wire models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator


class WireModel(BaseModel):
    """Model whose JSON keys follow the aslan API.

    Fields may be populated by attribute name or wire alias, and
    unknown keys returned by the server pass through untouched.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @field_validator("*", mode="before")
    @classmethod
    def null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        # aslan encodes nil slices, maps and pointers as null
        if value is None and info.field_name is not None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value

    def to_wire(self) -> dict[str, Any]:
        """Dump using wire key names."""
        return self.model_dump(by_alias=True, mode="json")
