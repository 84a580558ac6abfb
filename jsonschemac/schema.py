"""Schema model and the parser that flattens a document into an index.

A schema document is deserialized into a tree of :class:`SchemaDocument`
models and then rebuilt bottom-up as frozen :class:`SchemaNode` models.
Every node below the document root is inserted into the index under its
JSON pointer::

    {
      "definitions": {
        "user": {
          "type": "object",
          "properties": {"id": {"type": "string"}},
          "required": ["id"]
        }
      }
    }

yields the index::

    "#/definitions/user"                : SchemaNode(kind=object, name="User")
    "#/definitions/user/properties/id"  : SchemaNode(kind=string, name="ID")
"""
import logging
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Literal, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from jsonschemac.errors import MalformedInputError
from jsonschemac.helpers.name_resolvers import external_name_from_pointer, type_name_from_pointer

logger = logging.getLogger(__name__)

ROOT_POINTER = "#"
DEFINITIONS_PREFIX = "#/definitions/"


class Kind(str, Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    NUMBER = "number"
    INTEGER = "integer"
    STRING = "string"
    REFERENCE = "reference"


COMPLEX_KINDS = frozenset({Kind.OBJECT, Kind.ARRAY})

JsonType = Literal["null", "boolean", "object", "array", "number", "integer", "string"]


class SchemaDocument(BaseModel):
    """Raw shape of one schema fragment as it appears in the document."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    title: Optional[str] = None
    description: Optional[str] = None
    type: Optional[JsonType] = None
    definitions: Dict[str, "SchemaDocument"] = Field(default_factory=dict)
    properties: Dict[str, "SchemaDocument"] = Field(default_factory=dict)
    items: Optional["SchemaDocument"] = None
    ref: Optional[str] = Field(default=None, alias="$ref")
    required: List[str] = Field(default_factory=list)


SchemaDocument.model_rebuild()


class SchemaNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    pointer: str
    pointer_name: str
    name: str
    external_name: str
    kind: Optional[Kind] = None
    title: str = ""
    description: str = ""
    definitions: Dict[str, "SchemaNode"] = Field(default_factory=dict)
    properties: Dict[str, "SchemaNode"] = Field(default_factory=dict)
    items: Optional["SchemaNode"] = None
    reference_target: str = ""
    required: Tuple[str, ...] = ()

    @property
    def is_reference(self) -> bool:
        return self.kind is Kind.REFERENCE

    @property
    def is_complex(self) -> bool:
        return self.kind in COMPLEX_KINDS

    def property_pointer(self, property_name: str) -> str:
        return f"{self.pointer}/properties/{property_name}"


SchemaNode.model_rebuild()

Index = Mapping[str, SchemaNode]


def _ordered_unique(names: List[str]) -> Tuple[str, ...]:
    seen = set()
    result = []
    for name in names:
        if name not in seen:
            seen.add(name)
            result.append(name)
    return tuple(result)


def _build_node(doc: SchemaDocument, pointer: str, idx: Dict[str, SchemaNode]) -> SchemaNode:
    # children first: a node enters the index only after all its descendants
    definitions = {
        name: _build_node(doc.definitions[name], f"{pointer}/definitions/{name}", idx)
        for name in sorted(doc.definitions)
    }
    properties = {
        name: _build_node(doc.properties[name], f"{pointer}/properties/{name}", idx)
        for name in sorted(doc.properties)
    }
    items = _build_node(doc.items, f"{pointer}/items", idx) if doc.items is not None else None

    # a reference wins over any declared type
    if doc.ref:
        kind = Kind.REFERENCE
    elif doc.type is not None:
        kind = Kind(doc.type)
    else:
        kind = None

    node = SchemaNode(
        pointer=pointer,
        pointer_name=pointer.replace(DEFINITIONS_PREFIX, "", 1),
        name=type_name_from_pointer(pointer),
        external_name=external_name_from_pointer(pointer),
        kind=kind,
        title=doc.title or "",
        description=doc.description or "",
        definitions=definitions,
        properties=properties,
        items=items,
        reference_target=doc.ref or "",
        required=_ordered_unique(doc.required),
    )

    if pointer != ROOT_POINTER:
        idx[pointer] = node
    return node


def parse(data: Union[bytes, str]) -> Index:
    """Convert a raw schema document into a read-only index of its nodes.

    Raises:
        MalformedInputError: ``data`` is not a well-formed schema document.
    """
    try:
        doc = SchemaDocument.model_validate_json(data)
    except ValidationError as e:
        raise MalformedInputError(str(e)) from e

    idx: Dict[str, SchemaNode] = {}
    _build_node(doc, ROOT_POINTER, idx)

    logger.debug("indexed %d schemas", len(idx))
    return MappingProxyType(idx)
