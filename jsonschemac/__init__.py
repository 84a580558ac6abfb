from .context import GeneratorContext
from .errors import (
    SchemaError,
    MalformedInputError,
    UnresolvedReferenceError,
    InconsistentSchemaError,
    CycleDetectedError,
)
from .golang_generator import GoGenerator
from .mock_generator import MockGenerator
from .model_generator import GeneratedModel, generate_models, generate_type, generate_validation
from .schema import Index, Kind, SchemaNode, parse
from .helpers.ref import resolve_ref

__all__ = [
    "GeneratorContext",
    "GoGenerator",
    "MockGenerator",
    "GeneratedModel",
    "generate_models",
    "generate_type",
    "generate_validation",
    "Index",
    "Kind",
    "SchemaNode",
    "parse",
    "resolve_ref",
    "SchemaError",
    "MalformedInputError",
    "UnresolvedReferenceError",
    "InconsistentSchemaError",
    "CycleDetectedError",
]
