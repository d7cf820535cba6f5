"""
Shared base for the attachment entities.

Every entity can be built either from an instance or from raw key-value data;
`coerce` is the single place where that choice is made.
"""

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from slackhook.errors import InvalidInputError

E = TypeVar("E", bound="Entity")


def name_list(names: Iterable[str]) -> list[str]:
    """Copy an iterable of field names into a list; a bare string is rejected."""
    if isinstance(names, str):
        raise InvalidInputError(f"Expected an iterable of field names, got the string {names!r}")
    return list(names)


class Entity(BaseModel):
    model_config = ConfigDict(validate_assignment=True, populate_by_name=True)

    @classmethod
    def from_dict(cls: type[E], data: Mapping[str, Any]) -> E:
        """Build from raw data keyed by wire names. Unknown keys and None values are skipped."""
        try:
            return cls.model_validate({k: v for k, v in data.items() if v is not None})
        except ValidationError as e:
            raise InvalidInputError(
                f"Invalid {cls.__name__} data: {e.error_count()} error(s)",
                details={"errors": e.errors(include_url=False)},
            ) from e

    @classmethod
    def coerce(cls: type[E], value: Any) -> E:
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls.from_dict(value)
        raise InvalidInputError(
            f"{cls.__name__} must be an instance of {cls.__name__} or a mapping, "
            f"got {type(value).__name__}"
        )

    def _assign(self: E, name: str, value: Any) -> E:
        try:
            setattr(self, name, value)
        except ValidationError as e:
            raise InvalidInputError(
                f"Invalid value for {type(self).__name__}.{name}",
                details={"errors": e.errors(include_url=False)},
            ) from e
        return self

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
