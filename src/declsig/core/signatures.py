import re

from declsig.core.errors import InvalidSignatureRangeError
from declsig.core.legacy import (
    NAMESPACE_SEPARATOR,
    TYPE_SCOPE_SEPARATOR,
    baseline_file_name,
    with_file_prefix,
)
from declsig.core.names import format_element_name
from declsig.models import NodeKind, SyntaxNode

NO_NAME_PROVIDED = "<no name provided>"

# ASCII only, so non-breaking spaces inside literals survive as they always have
_MULTIPLE_WHITESPACES = re.compile(r"\s{2,}", re.ASCII)


def normalize_signature(signature: str) -> str:
    flattened = signature.replace("\r", " ").replace("\n", " ")
    return _MULTIPLE_WHITESPACES.sub(" ", flattened)


def short_signature(node: SyntaxNode) -> str:
    """Signature of the node alone, without its enclosing scopes."""
    if node.kind is NodeKind.FUNCTION:
        signature = _function_signature(node)
    elif node.kind is NodeKind.CLASS_OR_OBJECT:
        signature = _class_signature(node)
    elif node.kind is NodeKind.FILE:
        signature = _file_signature(node)
    else:
        signature = node.raw_text
    return normalize_signature(signature)


def full_signature(node: SyntaxNode) -> str:
    """Signature qualified by enclosing classes and the owning file name.

    A method ``bar`` of class ``Inner`` nested in ``Outer`` in ``Test.kt``
    yields ``Test.kt$Outer.Inner$fun bar()``.
    """
    signature = short_signature(node)
    class_names = [format_element_name(p.name or "") for p in node.parents if p.kind is NodeKind.CLASS_OR_OBJECT]
    if class_names:
        scope = NAMESPACE_SEPARATOR.join(reversed(class_names))
        signature = f"{scope}{TYPE_SCOPE_SEPARATOR}{signature}"
    return with_file_prefix(signature, baseline_file_name(node))


def _file_signature(node: SyntaxNode) -> str:
    return f"{node.package_name}{NAMESPACE_SEPARATOR}{baseline_file_name(node)}"


def _class_signature(node: SyntaxNode) -> str:
    signature = format_element_name(node.name) if node.name else NO_NAME_PROVIDED
    if node.type_parameters:
        signature += "<" + ", ".join(node.type_parameters) + ">"
    if node.supertypes:
        signature += " : " + "".join(name or "" for name in node.supertypes)
    return signature


def _function_signature(node: SyntaxNode) -> str:
    # Modifiers, name, type parameters and parameter/return types; never the body.
    if node.return_type_span is not None:
        end_offset = node.return_type_span.end
    elif node.parameter_list_span is not None:
        end_offset = node.parameter_list_span.end
    else:
        end_offset = 0

    start = node.content_start - node.text_span.start
    end = end_offset - node.text_span.start
    if not 0 <= start < end <= len(node.raw_text):
        raise InvalidSignatureRangeError(start, end, node.raw_text)
    return node.raw_text[start:end]
