"""Type and validation model generation.

Walks an index in name order and derives, for every ``object`` and
``array`` schema, a :class:`TypeShape` (the fields of the generated
type) and a :class:`ValidationRuleSet` (required-field checks followed
by nested validation calls). Primitive schemas are inlined as fields of
their parent and produce neither.

The result is a target language independent description; renderers such
as :mod:`jsonschemac.golang_generator` turn it into source text.
"""
import logging
from typing import Dict, List, Optional, Set, Tuple

from pydantic import BaseModel, ConfigDict

from jsonschemac.errors import InconsistentSchemaError
from jsonschemac.helpers.ref import resolve_ref_chain
from jsonschemac.schema import COMPLEX_KINDS, Index, Kind, SchemaNode

logger = logging.getLogger(__name__)


class FieldShape(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    external_name: str
    pointer: str
    kind: Kind
    # scalar kind name for primitives, generated type name otherwise
    type_name: str


class TypeShape(BaseModel):
    model_config = ConfigDict(frozen=True)

    pointer: str
    name: str
    external_name: str
    kind: Kind
    description: str = ""
    fields: Tuple[FieldShape, ...] = ()
    # array only; element_kind is None for arrays without (typed) items
    element_kind: Optional[Kind] = None
    element_type: str = ""


class RequiredCheck(BaseModel):
    model_config = ConfigDict(frozen=True)

    field_name: str
    property_name: str
    message: str


class NestedValidation(BaseModel):
    model_config = ConfigDict(frozen=True)

    field_name: str
    type_name: str
    pointer: str


class ElementValidation(BaseModel):
    model_config = ConfigDict(frozen=True)

    type_name: str


class ValidationRuleSet(BaseModel):
    model_config = ConfigDict(frozen=True)

    pointer: str
    name: str
    external_name: str
    kind: Kind
    required: Tuple[RequiredCheck, ...] = ()
    nested: Tuple[NestedValidation, ...] = ()
    elements: Optional[ElementValidation] = None


class GeneratedModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    types: Tuple[Tuple[str, TypeShape], ...] = ()
    validations: Tuple[Tuple[str, ValidationRuleSet], ...] = ()


def sorted_pointers_by_name(idx: Index) -> List[str]:
    return sorted(idx, key=lambda pointer: (idx[pointer].name, pointer))


def missing_property_message(node: SchemaNode, property_name: str) -> str:
    return f"invalid {node.external_name}: missing {property_name}"


def _type_name_for(resolved: SchemaNode) -> str:
    if resolved.kind in COMPLEX_KINDS:
        return resolved.name
    if resolved.kind is None:
        return ""
    return resolved.kind.value


def _has_field(resolved: SchemaNode) -> bool:
    return resolved.kind is not None and resolved.kind is not Kind.NULL


def _ensure_unique_name(candidate: str, used: Set[str]) -> str:
    if candidate not in used:
        used.add(candidate)
        return candidate
    i = 1
    while f"{candidate}{i}" in used:
        i += 1
    unique = f"{candidate}{i}"
    used.add(unique)
    return unique


def field_names(node: SchemaNode, idx: Index) -> Dict[str, str]:
    """Map each property that becomes a field to an identifier unique within ``node``.

    Properties are named in alphabetical order, so ``first_name`` keeps
    ``Firstname`` and a later ``firstname`` becomes ``Firstname1``.
    """
    used: Set[str] = set()
    names: Dict[str, str] = {}
    for property_name in sorted(node.properties):
        prop = node.properties[property_name]
        if not _has_field(resolve_ref_chain(prop, idx)):
            continue
        names[property_name] = _ensure_unique_name(prop.name, used)
        if names[property_name] != prop.name:
            logger.warning(
                "field %s of %s renamed to %s, the name is already taken",
                prop.name, node.pointer, names[property_name],
            )
    return names


def generate_field(prop: SchemaNode, idx: Index, name: Optional[str] = None) -> Optional[FieldShape]:
    resolved = resolve_ref_chain(prop, idx)
    if not _has_field(resolved):
        return None

    external_name = resolved.external_name if prop.is_reference else prop.external_name
    return FieldShape(
        name=name or prop.name,
        external_name=external_name,
        pointer=prop.pointer,
        kind=resolved.kind,
        type_name=_type_name_for(resolved),
    )


def generate_type(node: SchemaNode, idx: Index) -> Optional[TypeShape]:
    if node.kind is Kind.OBJECT:
        names = field_names(node, idx)
        fields = []
        for property_name in sorted(node.properties):
            field = generate_field(node.properties[property_name], idx, names.get(property_name))
            if field is not None:
                fields.append(field)
        return TypeShape(
            pointer=node.pointer,
            name=node.name,
            external_name=node.external_name,
            kind=node.kind,
            description=node.description or node.title,
            fields=tuple(fields),
        )

    if node.kind is Kind.ARRAY:
        element_kind = None
        element_type = ""
        if node.items is not None:
            resolved = resolve_ref_chain(node.items, idx)
            element_kind = resolved.kind
            element_type = _type_name_for(resolved)
        return TypeShape(
            pointer=node.pointer,
            name=node.name,
            external_name=node.external_name,
            kind=node.kind,
            description=node.description or node.title,
            element_kind=element_kind,
            element_type=element_type,
        )

    return None


def generate_required_checks(node: SchemaNode, idx: Index) -> Tuple[RequiredCheck, ...]:
    names = field_names(node, idx)
    checks = []
    for property_name in node.required:
        prop = idx.get(node.property_pointer(property_name))
        if prop is None:
            raise InconsistentSchemaError(node.pointer, property_name)
        if property_name not in names:
            # null and untyped properties have no field to check
            logger.warning(
                "skipping required check for %s: property has no generated field", prop.pointer
            )
            continue
        checks.append(
            RequiredCheck(
                field_name=names[property_name],
                property_name=property_name,
                message=missing_property_message(node, property_name),
            )
        )
    return tuple(checks)


def generate_validation(node: SchemaNode, idx: Index) -> Optional[ValidationRuleSet]:
    if node.kind is Kind.OBJECT:
        required = generate_required_checks(node, idx)
        names = field_names(node, idx)

        nested = []
        for property_name in sorted(node.properties):
            prop = node.properties[property_name]
            resolved = resolve_ref_chain(prop, idx)
            if resolved.kind in COMPLEX_KINDS:
                nested.append(
                    NestedValidation(field_name=names[property_name], type_name=resolved.name, pointer=prop.pointer)
                )

        return ValidationRuleSet(
            pointer=node.pointer,
            name=node.name,
            external_name=node.external_name,
            kind=node.kind,
            required=required,
            nested=tuple(nested),
        )

    if node.kind is Kind.ARRAY:
        elements = None
        if node.items is not None:
            resolved = resolve_ref_chain(node.items, idx)
            if resolved.kind in COMPLEX_KINDS:
                elements = ElementValidation(type_name=resolved.name)

        return ValidationRuleSet(
            pointer=node.pointer,
            name=node.name,
            external_name=node.external_name,
            kind=node.kind,
            elements=elements,
        )

    return None


def _warn_name_collisions(types: List[Tuple[str, TypeShape]]) -> None:
    seen: Dict[str, str] = {}
    for pointer, shape in types:
        if shape.name in seen:
            logger.warning(
                "type name %s generated for both %s and %s", shape.name, seen[shape.name], pointer
            )
        else:
            seen[shape.name] = pointer


def generate_models(idx: Index) -> GeneratedModel:
    """Generate every type shape and validation rule set of an index.

    Nothing is returned unless the whole index generates: the first
    error aborts the batch.
    """
    types: List[Tuple[str, TypeShape]] = []
    validations: List[Tuple[str, ValidationRuleSet]] = []

    for pointer in sorted_pointers_by_name(idx):
        node = idx[pointer]
        shape = generate_type(node, idx)
        if shape is not None:
            types.append((pointer, shape))
        rules = generate_validation(node, idx)
        if rules is not None:
            validations.append((pointer, rules))

    _warn_name_collisions(types)
    logger.debug("generated %d types and %d validations", len(types), len(validations))

    return GeneratedModel(types=tuple(types), validations=tuple(validations))
