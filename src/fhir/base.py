"""
Version-agnostic FHIR model machinery.

Every schema version builds its resources from the classes in this module:

- FhirModel: pydantic base with camelCase aliases, the FHIR JSON codec and
  the "logically empty" test used by every converter.
- Extension: free-form extension payload, shared by all versions.
- Element / BackboneElement: id and extension carriers.
- Primitive[T] / Enumeration[E]: primitive wrappers (value + id + extensions).
  Each version declares its own concrete primitive subclasses so that a
  converted tree only contains target-version types.

FHIR JSON carries a primitive's id and extensions in a sibling property
prefixed with an underscore ("url" / "_url"). The codec merges those siblings
into the primitive wrapper on input and splits them out again in to_json().
"""

import types
from enum import Enum
from functools import cache
from typing import Any, ClassVar, Generic, TypeVar, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")
E = TypeVar("E", bound="FhirEnum")


class FhirEnum(str, Enum):
    """
    Base class for FHIR code enumerations.

    Every subclass declares a NULL member, the "no code / not mapped" value.
    Codes the enumeration does not know parse to NULL instead of failing.
    """

    @classmethod
    def _missing_(cls, value: object) -> "FhirEnum":
        return cls.__members__["NULL"]

    @property
    def is_null(self) -> bool:
        return self.name == "NULL"


def _is_empty_value(value: Any) -> bool:
    """Return True when a field value carries no data."""
    if value is None:
        return True
    if isinstance(value, FhirModel):
        return value.is_empty()
    if isinstance(value, list):
        return all(_is_empty_value(item) for item in value)
    if isinstance(value, FhirEnum):
        return value.is_null
    if isinstance(value, str):
        return not value.strip()
    return False


def _to_json_value(value: Any) -> Any:
    if isinstance(value, FhirModel):
        return value.to_json()
    if isinstance(value, Enum):
        return value.value
    return value


def _field_shape(annotation: Any) -> tuple[Any, bool]:
    """Strip the Optional and list wrappers from a field annotation."""
    is_list = False
    if get_origin(annotation) in (Union, types.UnionType):
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(members) != 1:
            return annotation, False
        annotation = members[0]
    if get_origin(annotation) is list:
        is_list = True
        annotation = get_args(annotation)[0]
    return annotation, is_list


@cache
def _primitive_fields(model_cls: type["FhirModel"]) -> tuple[tuple[str, str, bool], ...]:
    """(field name, JSON key, is list) for every primitive-typed field."""
    fields = []
    for name, info in model_cls.model_fields.items():
        target, is_list = _field_shape(info.annotation)
        if isinstance(target, type) and issubclass(target, Primitive):
            fields.append((name, info.alias or name, is_list))
    return tuple(fields)


def _primitive_input(value: Any, element: Any) -> Any:
    """Combine a JSON primitive value with its "_name" element sibling."""
    if isinstance(value, (BaseModel, dict)):
        return value
    merged = dict(element) if isinstance(element, dict) else {}
    if value is not None:
        merged["value"] = value
    return merged


class FhirModel(BaseModel):
    """Base class for every FHIR element, datatype and resource model."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    # Fields that never make a model "non-empty" (e.g. the resourceType tag)
    _empty_ignores: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="before")
    @classmethod
    def _merge_primitive_elements(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        primitive_fields = _primitive_fields(cls)
        if not primitive_fields:
            return data

        data = dict(data)
        for name, alias, is_list in primitive_fields:
            key = alias if (alias in data or f"_{alias}" in data) else name
            value = data.get(key)
            element = data.pop(f"_{alias}", None)
            if value is None and element is None:
                continue

            if is_list:
                values = value or []
                elements = element or []
                data[key] = [
                    _primitive_input(
                        values[i] if i < len(values) else None,
                        elements[i] if i < len(elements) else None,
                    )
                    for i in range(max(len(values), len(elements)))
                ]
            else:
                data[key] = _primitive_input(value, element)
        return data

    def is_empty(self) -> bool:
        """True when no field (and no extra payload) carries data."""
        for name in type(self).model_fields:
            if name in self._empty_ignores:
                continue
            if not _is_empty_value(getattr(self, name)):
                return False
        return not self.model_extra

    def to_json(self) -> dict[str, Any]:
        """Serialise to a FHIR JSON dict, omitting empty fields."""
        result: dict[str, Any] = {}
        for name, info in type(self).model_fields.items():
            value = getattr(self, name)
            if _is_empty_value(value):
                continue
            key = info.alias or name

            if isinstance(value, Primitive):
                if value.json_value() is not None:
                    result[key] = value.json_value()
                element = value.element_json()
                if element:
                    result[f"_{key}"] = element
            elif isinstance(value, list) and any(
                isinstance(item, Primitive) for item in value
            ):
                items = [item for item in value if not _is_empty_value(item)]
                result[key] = [item.json_value() for item in items]
                elements = [item.element_json() for item in items]
                if any(elements):
                    result[f"_{key}"] = [element or None for element in elements]
            elif isinstance(value, list):
                result[key] = [
                    _to_json_value(item) for item in value if not _is_empty_value(item)
                ]
            else:
                result[key] = _to_json_value(value)

        if self.model_extra:
            result.update(self.model_extra)
        return result


class Extension(FhirModel):
    """
    Free-form extension payload.

    Only the url and nested extensions are modelled; the value[x] property is
    kept exactly as received, so extensions move between versions untouched.
    """

    model_config = ConfigDict(extra="allow")

    url: str | None = None
    extension: list["Extension"] = Field(default_factory=list)


class Element(FhirModel):
    """Base for all elements: an optional id plus extensions."""

    id: str | None = None
    extension: list[Extension] = Field(default_factory=list)


class BackboneElement(Element):
    """Element that can also carry modifier extensions."""

    modifier_extension: list[Extension] = Field(default_factory=list)


class Primitive(Element, Generic[T]):
    """Primitive wrapper: the value plus the element's id and extensions."""

    value: T | None = None

    @property
    def has_value(self) -> bool:
        return not _is_empty_value(self.value)

    def json_value(self) -> Any:
        if isinstance(self.value, FhirEnum) and self.value.is_null:
            return None
        return _to_json_value(self.value)

    def element_json(self) -> dict[str, Any]:
        element: dict[str, Any] = {}
        if self.id:
            element["id"] = self.id
        if self.extension:
            element["extension"] = [ext.to_json() for ext in self.extension]
        return element


class Enumeration(Primitive[E], Generic[E]):
    """Primitive code constrained to a FhirEnum."""

    @model_validator(mode="before")
    @classmethod
    def _coerce_code(cls, data: Any) -> Any:
        args = cls.__pydantic_generic_metadata__["args"]
        if args and isinstance(data, dict) and isinstance(data.get("value"), str):
            enum_cls = args[0]
            data = {**data, "value": enum_cls(data["value"])}
        return data


class FhirResource(FhirModel):
    """
    Common behaviour of top-level resources.

    Resources carry user data (e.g. the publication path) that travels with
    the instance but is never serialised.
    """

    _empty_ignores: ClassVar[frozenset[str]] = frozenset({"resource_type"})
    _user_data: dict[str, Any] = PrivateAttr(default_factory=dict)

    def set_user_data(self, key: str, value: Any) -> None:
        self._user_data[key] = value

    def get_user_data(self, key: str, default: Any = None) -> Any:
        return self._user_data.get(key, default)
