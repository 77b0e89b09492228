"""
Version-independent helpers shared by every structural converter.

Converters build a fresh target tree; nothing here mutates the source.
"""

from collections.abc import Callable, Iterable
from typing import TypeVar

from src.fhir.base import BackboneElement, Element, FhirModel, Primitive

S = TypeVar("S")
T = TypeVar("T")
P = TypeVar("P", bound=Primitive)


def copy_element(source: Element, target: Element) -> None:
    """
    Copy the element-level properties every converter carries over.

    Copies the id and deep copies of the extensions, plus the modifier
    extensions when both sides are backbone elements.
    """
    target.id = source.id
    target.extension = [ext.model_copy(deep=True) for ext in source.extension]
    if isinstance(source, BackboneElement) and isinstance(target, BackboneElement):
        target.modifier_extension = [
            ext.model_copy(deep=True) for ext in source.modifier_extension
        ]


def copy_domain_resource(
    source,
    target,
    convert_meta: Callable,
    convert_narrative: Callable,
) -> None:
    """
    Copy the Resource / DomainResource properties onto a converted resource.

    Args:
        source: Source-version DomainResource
        target: Freshly built target-version DomainResource
        convert_meta: Meta converter for the direction being applied
        convert_narrative: Narrative converter for the direction being applied
    """
    target.id = source.id
    target.meta = convert_meta(source.meta)
    target.implicit_rules = convert_primitive(
        source.implicit_rules, type(target).model_fields["implicit_rules"].annotation
    )
    target.language = convert_primitive(
        source.language, type(target).model_fields["language"].annotation
    )
    target.text = convert_narrative(source.text)
    target.extension = [ext.model_copy(deep=True) for ext in source.extension]
    target.modifier_extension = [
        ext.model_copy(deep=True) for ext in source.modifier_extension
    ]


def convert_primitive(source: Primitive | None, target_cls) -> Primitive | None:
    """
    Re-express a primitive as another primitive class.

    The value is carried over untouched (no lexical validation). An absent or
    empty source yields None.

    Args:
        source: Primitive to convert, or None
        target_cls: Target primitive class, or an Optional annotation of one
    """
    if source is None or source.is_empty():
        return None
    target_cls = _unwrap_optional(target_cls)
    target = target_cls(value=source.value)
    copy_element(source, target)
    return target


def convert_list(items: Iterable[S], convert: Callable[[S], T | None]) -> list[T]:
    """Convert each item in order, skipping items that convert to nothing."""
    result: list[T] = []
    for item in items:
        converted = convert(item)
        if converted is not None:
            result.append(converted)
    return result


def is_empty_except(model: FhirModel | None, *names: str) -> bool:
    """True when every field of model other than names carries no data."""
    if model is None:
        return True
    stripped = model.model_copy(update={name: None for name in names})
    return stripped.is_empty()


def _unwrap_optional(annotation):
    args = getattr(annotation, "__args__", None)
    if args and not isinstance(annotation, type):
        members = [arg for arg in args if arg is not type(None)]
        if len(members) == 1:
            return members[0]
    return annotation
