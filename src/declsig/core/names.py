from declsig.models import SyntaxNode

UNKNOWN_NAME = "<UnknownName>"

_PATH_SEPARATORS = ("/", "\\")


def format_element_name(name: str) -> str:
    """Reduce a path-like name to its last component.

    File nodes carry their full path as name; printing it next to the
    location produced two paths per line and broke hyperlinking in editors.
    ``/full/path/to/Test.kt`` becomes ``Test.kt``.
    """
    cut = max(name.rfind(sep) for sep in _PATH_SEPARATORS)
    if cut < 0:
        return name
    return name[cut + 1 :]


def resolve_name(node: SyntaxNode) -> str:
    if node.name is None:
        return UNKNOWN_NAME
    return format_element_name(node.name)
