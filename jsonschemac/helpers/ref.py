from jsonschemac.errors import CycleDetectedError, UnresolvedReferenceError
from jsonschemac.schema import Index, SchemaNode


def resolve_ref(node: SchemaNode, idx: Index) -> SchemaNode:
    if not node.is_reference:
        return node

    target = idx.get(node.reference_target)
    if target is None:
        raise UnresolvedReferenceError(node.pointer, node.reference_target)
    return target


def resolve_ref_chain(node: SchemaNode, idx: Index) -> SchemaNode:
    """
    Follow references until a non-reference node is reached.
    Raises CycleDetectedError when a reference is visited twice.
    """
    chain = []
    cur = node
    while cur.is_reference:
        if cur.pointer in chain:
            raise CycleDetectedError(cur.pointer, chain)
        chain.append(cur.pointer)
        cur = resolve_ref(cur, idx)
    return cur
