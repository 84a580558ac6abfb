from typing import Optional, Sequence


class SchemaError(Exception):
    """Base class for everything the schema pipeline raises.

    Attributes:
        pointer: JSON pointer of the offending node, if known
        message: Human-readable message
    """

    def __init__(self, message: str, *, pointer: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.pointer = pointer


class MalformedInputError(SchemaError):
    def __init__(self, reason: str):
        super().__init__(f"malformed schema document: {reason}")
        self.reason = reason


class UnresolvedReferenceError(SchemaError):
    def __init__(self, pointer: str, target: str):
        super().__init__(
            f"{pointer} references {target} which does not exist in index",
            pointer=pointer,
        )
        self.target = target


class InconsistentSchemaError(SchemaError):
    def __init__(self, pointer: str, property: str):
        super().__init__(
            f"{pointer} requires property '{property}' "
            f"but {pointer}/properties/{property} does not exist in index",
            pointer=pointer,
        )
        self.property = property


class CycleDetectedError(SchemaError):
    def __init__(self, pointer: str, chain: Sequence[str]):
        path = " -> ".join(list(chain) + [pointer])
        super().__init__(
            f"reference cycle detected at {pointer}: {path}",
            pointer=pointer,
        )
        self.chain = tuple(chain)
