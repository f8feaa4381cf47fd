from declsig.core.names import resolve_name
from declsig.core.signatures import full_signature
from declsig.models import Entity, Location, SyntaxNode


def location_from(node: SyntaxNode, path: str) -> Location:
    point = node.start_point
    if point is None:
        return Location(path=path, line=0, column=0)
    return Location(path=path, line=point.row + 1, column=point.column + 1)


def entity_from(node: SyntaxNode, path: str) -> Entity:
    """Describe a node for reporting: display name, baseline signature and location."""
    return Entity(
        name=resolve_name(node),
        signature=full_signature(node),
        location=location_from(node, path),
    )
