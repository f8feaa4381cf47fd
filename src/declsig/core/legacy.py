"""File-name prefix of full signatures.

The parser once used the on-disk leaf name as a file node's name instead of
its full path, and every recorded baseline signature starts with that leaf
name. File nodes are now named by their full path. The prefix below keeps
reading the leaf name so old baselines still match; changing it means
regenerating all baselines in a new major release.
"""

from declsig.core.errors import SignatureError
from declsig.core.names import format_element_name
from declsig.models import SyntaxNode

FILE_SCOPE_SEPARATOR = "$"
TYPE_SCOPE_SEPARATOR = "$"
NAMESPACE_SEPARATOR = "."


def baseline_file_name(node: SyntaxNode) -> str:
    file = node.containing_file
    if file is None:
        raise SignatureError(f"No containing file for element: {node.raw_text}")
    return format_element_name(file.file_display_name or file.name or "")


def with_file_prefix(signature: str, file_name: str) -> str:
    if signature.startswith(file_name):
        return signature
    return f"{file_name}{FILE_SCOPE_SEPARATOR}{signature}"
