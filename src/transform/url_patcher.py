"""
Canonical URL patching.

Core FHIR canonical URLs (http://hl7.org/fhir/<Type>/<id>) do not say which
FHIR version they belong to. When resources from an older package are loaded
next to the native definitions, their core URLs are rewritten into a
version-specific namespace (http://hl7.org/fhir/<version>/<id>) so the two
sets cannot collide.

Only the references needed to follow StructureDefinition/OperationDefinition
-> ValueSet -> CodeSystem are patched.
"""

import logging
from collections.abc import Callable
from typing import Any

from src.fhir import stu3
from src.fhir.base import Extension, FhirResource
from src.fhir.versions import VersionFamily

logger = logging.getLogger(__name__)

URL_BASE = "http://hl7.org/fhir/"
URL_ELEMENT_DEF_NAMESPACE = (
    "http://hl7.org/fhir/StructureDefinition/elementdefinition-namespace"
)

_VERSION_SEGMENTS = tuple(f"{family.value}/" for family in VersionFamily)


class UrlPatcher:
    """
    Rewrites core canonical URLs into a version namespace.

    Args:
        version_segment: Version namespace to patch into (e.g. "1.4")
        enabled: When False every method is a no-op
    """

    def __init__(self, version_segment: str, enabled: bool = True):
        self.version_segment = version_segment
        self.enabled = enabled
        self._patchers: dict[str, Callable[[Any], None]] = {
            "StructureDefinition": self._patch_structure_definition,
            "ValueSet": self._patch_value_set,
            "OperationDefinition": self._patch_operation_definition,
        }

    def patch_url(self, url: str | None, type_name: str) -> str | None:
        """
        Patch one canonical URL that refers to a resource of type_name.

        URLs outside the core namespace are returned unchanged, as are URLs
        that are already in a version namespace.
        """
        if not self.enabled or url is None:
            return url
        if url.startswith(f"{URL_BASE}{type_name}/"):
            rest = url[len(URL_BASE) + len(type_name) + 1 :]
            return f"{URL_BASE}{self.version_segment}/{rest}"
        if type_name == "CodeSystem" and url.startswith(URL_BASE):
            rest = url[len(URL_BASE) :]
            if rest and not rest.startswith(_VERSION_SEGMENTS):
                return f"{URL_BASE}{self.version_segment}/{rest}"
        return url

    def patch_resource(self, resource: FhirResource) -> FhirResource:
        """
        Patch a resource in place and return it.

        Only resources with a canonical url are touched.
        """
        if not self.enabled or "url" not in type(resource).model_fields:
            return resource

        resource_type = resource.resource_type
        self._patch_primitive(resource.url, resource_type)

        patcher = self._patchers.get(resource_type)
        if patcher is not None:
            patcher(resource)
        logger.debug("Patched URLs of %s/%s", resource_type, resource.id)
        return resource

    def _patch_primitive(self, primitive, type_name: str) -> None:
        if primitive is not None and primitive.value is not None:
            primitive.value = self.patch_url(primitive.value, type_name)

    # --- Per-resource walks ---------------------------------------------------

    def _patch_structure_definition(self, sd: stu3.StructureDefinition) -> None:
        if sd.snapshot is not None:
            assign_element_ids(sd.snapshot.element)
        if sd.differential is not None:
            assign_element_ids(sd.differential.element)

        if not any(ext.url == URL_ELEMENT_DEF_NAMESPACE for ext in sd.extension):
            sd.extension.append(
                Extension(url=URL_ELEMENT_DEF_NAMESPACE, valueUri=URL_BASE)
            )

        for component in (sd.snapshot, sd.differential):
            if component is None:
                continue
            for element in component.element:
                self._patch_element_definition(element)

    def _patch_element_definition(self, element: stu3.ElementDefinition) -> None:
        for type_ref in element.type:
            self._patch_primitive(type_ref.target_profile, "StructureDefinition")
        if element.binding is not None:
            self._patch_binding(element.binding)

    def _patch_value_set(self, vs: stu3.ValueSet) -> None:
        if vs.compose is None:
            return
        for concept_set in [*vs.compose.include, *vs.compose.exclude]:
            self._patch_primitive(concept_set.system, "CodeSystem")

    def _patch_operation_definition(self, od: stu3.OperationDefinition) -> None:
        for parameter in od.parameter:
            self._patch_parameter(parameter)

    def _patch_parameter(self, parameter: stu3.OperationDefinitionParameter) -> None:
        if parameter.binding is not None:
            self._patch_binding(parameter.binding)
        for part in parameter.part:
            self._patch_parameter(part)

    def _patch_binding(self, binding) -> None:
        self._patch_primitive(binding.value_set_uri, "ValueSet")
        if binding.value_set_reference is not None:
            self._patch_primitive(binding.value_set_reference.reference, "ValueSet")


def assign_element_ids(elements: list[stu3.ElementDefinition]) -> None:
    """
    Set every element id from its path, replacing any existing id.

    Slice names of the enclosing slices are carried into the id
    ("Patient.identifier:mrn.system").
    """
    slice_names: dict[str, str] = {}
    for element in elements:
        if element.path is None or not element.path.value:
            continue
        path = element.path.value

        if element.slice_name is not None and element.slice_name.value:
            slice_names[path] = element.slice_name.value
        else:
            closed = [p for p in slice_names if p == path or p.startswith(f"{path}.")]
            for sliced in closed:
                del slice_names[sliced]

        parts = path.split(".")
        segments = []
        for i, part in enumerate(parts):
            slice_name = slice_names.get(".".join(parts[: i + 1]))
            segments.append(f"{part}:{slice_name}" if slice_name else part)
        element.id = ".".join(segments)
