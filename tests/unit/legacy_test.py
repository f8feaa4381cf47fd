"""Unit tests for the file-name prefix kept compatible with old baselines."""

import pytest

from declsig.core.errors import SignatureError
from declsig.core.legacy import (
    FILE_SCOPE_SEPARATOR,
    NAMESPACE_SEPARATOR,
    TYPE_SCOPE_SEPARATOR,
    baseline_file_name,
    with_file_prefix,
)
from declsig.models import NodeKind, SyntaxNode, TextSpan


def _file(name: str | None, display_name: str | None) -> SyntaxNode:
    return SyntaxNode(
        kind=NodeKind.FILE,
        text_span=TextSpan(start=0, end=0),
        raw_text="",
        name=name,
        package_name="com.example",
        file_display_name=display_name,
    )


def _member(file: SyntaxNode) -> SyntaxNode:
    return SyntaxNode(kind=NodeKind.OTHER, text_span=TextSpan(start=0, end=3), raw_text="val", parents=(file,))


def test_separators_are_fixed() -> None:
    assert FILE_SCOPE_SEPARATOR == "$"
    assert TYPE_SCOPE_SEPARATOR == "$"
    assert NAMESPACE_SEPARATOR == "."


def test_uses_leaf_file_name_not_full_path() -> None:
    file = _file("/home/dev/project/src/Test.kt", "Test.kt")
    assert baseline_file_name(file) == "Test.kt"
    assert baseline_file_name(_member(file)) == "Test.kt"


def test_falls_back_to_leaf_of_name() -> None:
    file = _file("/home/dev/project/src/Test.kt", None)
    assert baseline_file_name(_member(file)) == "Test.kt"


def test_display_name_with_path_is_reduced() -> None:
    file = _file(None, "src/Test.kt")
    assert baseline_file_name(file) == "Test.kt"


def test_node_without_file_is_rejected() -> None:
    orphan = SyntaxNode(kind=NodeKind.OTHER, text_span=TextSpan(start=0, end=3), raw_text="val")
    with pytest.raises(SignatureError):
        baseline_file_name(orphan)


def test_prefix_is_added_once() -> None:
    assert with_file_prefix("A$fun foo()", "Test.kt") == "Test.kt$A$fun foo()"
    assert with_file_prefix("Test.kt$A$fun foo()", "Test.kt") == "Test.kt$A$fun foo()"
