from __future__ import annotations

from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

M = TypeVar("M", bound="EMISModel")


class EMISModel(BaseModel):
    """
    Base for every EMIS record.

    Attributes are snake_case; the wire shape is the lowerCamelCase alias.
    Either spelling is accepted on input, output always uses the alias.

    Optional fields may be left out but never sent as ``null``: absent and
    present are different states, and a present value is always checked by
    its own type.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,  # accept snake_case attribute names too
        extra="ignore",         # unknown keys are stripped, not rejected
    )

    @field_validator("*", mode="before")
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        if value is None:
            raise PydanticCustomError("invalid_type", "Expected a value, received null (omit the field instead)")
        return value

    # ---- wire helpers -------------------------------------------------
    def to_wire(self) -> dict[str, Any]:
        """JSON-compatible dict using wire names; absent optionals are omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent: Optional[int] = None) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)

    @classmethod
    def from_wire(cls: type[M], data: Any) -> M:
        return cls.model_validate(data)

    @classmethod
    def from_json(cls: type[M], raw: str | bytes) -> M:
        return cls.model_validate_json(raw)
