"""Unit tests for display name resolution."""

import pytest

from declsig.core.names import UNKNOWN_NAME, format_element_name, resolve_name
from declsig.models import NodeKind, SyntaxNode, TextSpan


def _node(name: str | None, kind: NodeKind = NodeKind.CLASS_OR_OBJECT) -> SyntaxNode:
    return SyntaxNode(kind=kind, text_span=TextSpan(start=0, end=1), raw_text="x", name=name)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Test.kt", "Test.kt"),
        ("/full/path/to/Test.kt", "Test.kt"),
        ("relative/Test.kt", "Test.kt"),
        ("C:\\project\\src\\Test.kt", "Test.kt"),
        ("mixed/dir\\Test.kt", "Test.kt"),
    ],
    ids=["plain", "absolute", "relative", "windows", "mixed"],
)
def test_format_element_name(name: str, expected: str) -> None:
    assert format_element_name(name) == expected


def test_declared_name_is_returned() -> None:
    assert resolve_name(_node("Repository")) == "Repository"


def test_missing_name_uses_placeholder() -> None:
    assert resolve_name(_node(None)) == UNKNOWN_NAME == "<UnknownName>"


def test_file_path_is_reduced_to_leaf() -> None:
    assert resolve_name(_node("/home/dev/src/Test.kt", NodeKind.FILE)) == "Test.kt"


def test_empty_name_is_kept() -> None:
    assert resolve_name(_node("")) == ""
