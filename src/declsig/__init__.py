from declsig.core.entity import entity_from
from declsig.core.errors import InvalidSignatureRangeError, SignatureError
from declsig.core.legacy import baseline_file_name
from declsig.core.names import UNKNOWN_NAME, resolve_name
from declsig.core.signatures import full_signature, normalize_signature, short_signature
from declsig.core.syntax import extract_declarations_from_file, extract_declarations_from_source
from declsig.models import Entity, Finding, Location, NodeKind, Position, SyntaxNode, TextSpan

__all__ = [
    "UNKNOWN_NAME",
    "Entity",
    "Finding",
    "InvalidSignatureRangeError",
    "Location",
    "NodeKind",
    "Position",
    "SignatureError",
    "SyntaxNode",
    "TextSpan",
    "baseline_file_name",
    "entity_from",
    "extract_declarations_from_file",
    "extract_declarations_from_source",
    "full_signature",
    "normalize_signature",
    "resolve_name",
    "short_signature",
]
