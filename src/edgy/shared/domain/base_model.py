"""
Base domain model with plugin JSON compatibility.

Provides automatic camelCase ↔ snake_case conversion for the Figma plugin
and the results files it reads. All domain models should inherit from
BaseDomainModel.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, fields
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Type, TypeVar

T = TypeVar("T", bound="BaseDomainModel")


def to_camel_case(snake_str: str) -> str:
    """
    Convert snake_case to camelCase.

    Examples:
        >>> to_camel_case("screen_id")
        'screenId'
        >>> to_camel_case("suggested_components")
        'suggestedComponents'
    """
    components = snake_str.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


def to_snake_case(camel_str: str) -> str:
    """
    Convert camelCase to snake_case.

    Examples:
        >>> to_snake_case("screenId")
        'screen_id'
        >>> to_snake_case("targetFrameName")
        'target_frame_name'
    """
    result = [camel_str[0].lower()]
    for char in camel_str[1:]:
        if char.isupper():
            result.extend(["_", char.lower()])
        else:
            result.append(char)
    return "".join(result)


def _serialize(value: Any) -> Any:
    if isinstance(value, BaseDomainModel):
        return value.to_json()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [_serialize(item) for item in value]
    if isinstance(value, dict):
        return {k: _serialize(v) for k, v in value.items()}
    return value


@dataclass
class BaseDomainModel:
    """
    Base class for all domain models.

    Plugin JSON compatibility:
    - to_json() serializes to camelCase
    - from_json() deserializes from camelCase plugin JSON
    - Enum values are serialized as their value
    - Dates are serialized as ISO 8601 strings
    - Nested models, lists and dicts are serialized recursively
    """

    def to_json(self) -> Dict[str, Any]:
        """
        Serialize to plugin-compatible JSON (camelCase).

        Returns:
            Dictionary with camelCase keys, Enum values, dates as ISO strings
        """
        return {
            to_camel_case(field.name): _serialize(getattr(self, field.name))
            for field in fields(self)
        }

    @classmethod
    def from_json(cls: Type[T], data: Dict[str, Any]) -> T:
        """
        Deserialize from plugin JSON (camelCase) to Python model (snake_case).

        Nested models are not converted here; subclasses holding nested
        models override this method.

        Args:
            data: Dictionary with camelCase keys

        Returns:
            Instance of the domain model with snake_case fields

        Raises:
            ValueError: If required fields are missing
        """
        kwargs: Dict[str, Any] = {}

        for field in fields(cls):
            json_key = to_camel_case(field.name)

            if json_key not in data:
                if field.default is not dataclasses.MISSING or field.default_factory is not dataclasses.MISSING:  # type: ignore[attr-defined]
                    continue
                raise ValueError(f"Missing required field: {json_key}")

            kwargs[field.name] = data[json_key]

        return cls(**kwargs)

    def __str__(self) -> str:
        """String representation for logging."""
        field_strs = [f"{field.name}={getattr(self, field.name)!r}" for field in fields(self)]
        return f"{self.__class__.__name__}({', '.join(field_strs)})"

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return self.__str__()
