import bisect
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import cast

from tree_sitter import Node
from tree_sitter_language_pack import SupportedLanguage, get_parser

from declsig.core.languages import normalize_language, resolve_language
from declsig.core.names import format_element_name
from declsig.models import NodeKind, Position, SyntaxNode, TextSpan

logger = logging.getLogger(__name__)


class _SourceText:
    """Decoded source with tree-sitter byte offsets mapped to character offsets."""

    def __init__(self, source_bytes: bytes) -> None:
        self.text = source_bytes.decode("utf-8", errors="surrogateescape")
        self._char_at_byte: list[int] | None = None
        if len(self.text) != len(source_bytes):
            char_at_byte = [0] * (len(source_bytes) + 1)
            byte_offset = 0
            for index, char in enumerate(self.text):
                width = len(char.encode("utf-8", errors="surrogateescape"))
                for i in range(width):
                    char_at_byte[byte_offset + i] = index
                byte_offset += width
            char_at_byte[byte_offset] = len(self.text)
            self._char_at_byte = char_at_byte

    def offset(self, byte: int) -> int:
        if self._char_at_byte is None:
            return byte
        return self._char_at_byte[byte]

    def span(self, node: Node) -> TextSpan:
        return TextSpan(start=self.offset(node.start_byte), end=self.offset(node.end_byte))

    def slice(self, node: Node) -> str:
        span = self.span(node)
        return self.text[span.start : span.end]


class _LanguageRules(ABC):
    comment_types: frozenset[str] = frozenset()
    class_types: frozenset[str] = frozenset()
    function_types: frozenset[str] = frozenset()

    def kind_of(self, node: Node) -> NodeKind | None:
        if node.type in self.class_types:
            return NodeKind.CLASS_OR_OBJECT
        if node.type in self.function_types:
            return NodeKind.FUNCTION
        return None

    @abstractmethod
    def name_of(self, node: Node, source: _SourceText) -> str | None: ...

    @abstractmethod
    def type_parameters(self, node: Node, source: _SourceText) -> list[str]: ...

    @abstractmethod
    def supertypes(self, node: Node, source: _SourceText) -> list[str | None]: ...

    @abstractmethod
    def parameter_list(self, node: Node) -> Node | None: ...

    @abstractmethod
    def return_type(self, node: Node) -> Node | None: ...

    def package_name(self, root: Node, source: _SourceText) -> str | None:
        """Package declared in the file itself, or None when the language has no such header."""
        return None


class _PythonRules(_LanguageRules):
    comment_types = frozenset({"comment"})
    class_types = frozenset({"class_definition"})
    function_types = frozenset({"function_definition"})

    def name_of(self, node: Node, source: _SourceText) -> str | None:
        name = node.child_by_field_name("name")
        return source.slice(name) if name is not None else None

    def type_parameters(self, node: Node, source: _SourceText) -> list[str]:
        params = node.child_by_field_name("type_parameters")
        if params is None:
            return []
        return [source.slice(p) for p in params.named_children if p.type not in self.comment_types]

    def supertypes(self, node: Node, source: _SourceText) -> list[str | None]:
        bases = node.child_by_field_name("superclasses")
        if bases is None:
            return []
        # metaclass=... and friends are class keywords, not supertypes
        return [
            self._referenced_name(base, source)
            for base in bases.named_children
            if base.type not in self.comment_types and base.type != "keyword_argument"
        ]

    def _referenced_name(self, node: Node, source: _SourceText) -> str | None:
        if node.type == "identifier":
            return source.slice(node)
        if node.type == "attribute":
            attribute = node.child_by_field_name("attribute")
            return source.slice(attribute) if attribute is not None else None
        if node.type == "subscript":
            value = node.child_by_field_name("value")
            return self._referenced_name(value, source) if value is not None else None
        if node.type == "call":
            function = node.child_by_field_name("function")
            return self._referenced_name(function, source) if function is not None else None
        return None

    def parameter_list(self, node: Node) -> Node | None:
        return node.child_by_field_name("parameters")

    def return_type(self, node: Node) -> Node | None:
        return node.child_by_field_name("return_type")


class _KotlinRules(_LanguageRules):
    comment_types = frozenset({"comment", "line_comment", "multiline_comment"})
    class_types = frozenset({"class_declaration", "object_declaration", "companion_object", "object_literal"})
    function_types = frozenset({"function_declaration"})

    _identifier_types = frozenset({"simple_identifier", "type_identifier", "identifier"})
    _after_return_type = frozenset({"function_body", "type_constraints"})

    def name_of(self, node: Node, source: _SourceText) -> str | None:
        if node.type == "object_literal":
            return None
        name = next((c for c in node.children if c.type in self._identifier_types), None)
        if name is not None:
            return source.slice(name)
        if node.type == "companion_object":
            return "Companion"
        return None

    def type_parameters(self, node: Node, source: _SourceText) -> list[str]:
        params = next((c for c in node.children if c.type == "type_parameters"), None)
        if params is None:
            return []
        return [source.slice(p) for p in params.named_children if p.type == "type_parameter"]

    def supertypes(self, node: Node, source: _SourceText) -> list[str | None]:
        specifiers: list[Node] = []
        for child in node.children:
            if child.type == "delegation_specifier":
                specifiers.append(child)
            elif child.type == "delegation_specifiers":
                specifiers.extend(c for c in child.children if c.type == "delegation_specifier")
        return [self._referenced_name(s, source) for s in specifiers]

    def _referenced_name(self, specifier: Node, source: _SourceText) -> str | None:
        user_type = self._find_user_type(specifier)
        if user_type is None:
            return None
        names = [c for c in user_type.children if c.type == "type_identifier"]
        return source.slice(names[-1]) if names else None

    def _find_user_type(self, node: Node) -> Node | None:
        for child in node.named_children:
            if child.type == "user_type":
                return child
            if child.type in ("constructor_invocation", "explicit_delegation"):
                return self._find_user_type(child)
        return None

    def parameter_list(self, node: Node) -> Node | None:
        return next((c for c in node.children if c.type == "function_value_parameters"), None)

    def return_type(self, node: Node) -> Node | None:
        seen_parameters = False
        for child in node.children:
            if child.type == "function_value_parameters":
                seen_parameters = True
            elif not seen_parameters or not child.is_named or child.type in self.comment_types:
                continue
            elif child.type in self._after_return_type:
                return None
            else:
                return child
        return None

    def package_name(self, root: Node, source: _SourceText) -> str | None:
        header = next((c for c in root.children if c.type == "package_header"), None)
        if header is None:
            return ""
        name = next((c for c in header.named_children if c.type not in self.comment_types), None)
        return source.slice(name).strip() if name is not None else ""


_RULES: dict[str, _LanguageRules] = {
    "kotlin": _KotlinRules(),
    "python": _PythonRules(),
}


def _start_skipping_comments(node: Node, rules: _LanguageRules, source: _SourceText) -> int:
    first = next((c for c in node.children if c.type not in rules.comment_types), None)
    return source.offset(first.start_byte if first is not None else node.start_byte)


def _build_node(
    ts_node: Node,
    kind: NodeKind,
    parents: tuple[SyntaxNode, ...],
    rules: _LanguageRules,
    source: _SourceText,
) -> SyntaxNode:
    span = source.span(ts_node)
    parameters: TextSpan | None = None
    return_type: TextSpan | None = None
    type_parameters: list[str] = []
    supertypes: list[str | None] = []

    if kind is NodeKind.FUNCTION:
        parameter_node = rules.parameter_list(ts_node)
        return_type_node = rules.return_type(ts_node)
        parameters = source.span(parameter_node) if parameter_node is not None else None
        return_type = source.span(return_type_node) if return_type_node is not None else None
    elif kind is NodeKind.CLASS_OR_OBJECT:
        type_parameters = rules.type_parameters(ts_node, source)
        supertypes = rules.supertypes(ts_node, source)

    return SyntaxNode(
        kind=kind,
        text_span=span,
        raw_text=source.text[span.start : span.end],
        name=rules.name_of(ts_node, source),
        start_offset_skipping_comments=_start_skipping_comments(ts_node, rules, source),
        parents=parents,
        start_point=Position(row=ts_node.start_point[0], column=ts_node.start_point[1]),
        parameter_list_span=parameters,
        return_type_span=return_type,
        type_parameters=tuple(type_parameters),
        supertypes=tuple(supertypes),
    )


def _collect(
    ts_node: Node,
    parents: tuple[SyntaxNode, ...],
    rules: _LanguageRules,
    source: _SourceText,
    out: list[SyntaxNode],
) -> None:
    for child in ts_node.named_children:
        kind = rules.kind_of(child)
        if kind is None:
            _collect(child, parents, rules, source, out)
            continue
        node = _build_node(child, kind, parents, rules, source)
        out.append(node)
        _collect(child, (node, *parents), rules, source, out)


def extract_declarations_from_source(
    source_bytes: bytes,
    path: str,
    language: str,
    package: str | None = None,
) -> list[SyntaxNode]:
    """Parse source and return the file node followed by its declarations in document order."""
    resolved_language = normalize_language(language)
    rules = _RULES[resolved_language]
    parser = get_parser(cast(SupportedLanguage, resolved_language))
    tree = parser.parse(source_bytes)
    source = _SourceText(source_bytes)

    root = tree.root_node
    if root.has_error:
        logger.warning("Syntax errors in %s, some declarations may be missing", path)

    package_name = rules.package_name(root, source)
    if package_name is None:
        package_name = package or ""

    file_node = SyntaxNode(
        kind=NodeKind.FILE,
        text_span=TextSpan(start=0, end=len(source.text)),
        raw_text=source.text,
        name=path,
        parents=(),
        start_point=Position(row=0, column=0),
        package_name=package_name,
        file_display_name=format_element_name(path),
    )
    declarations = [file_node]
    _collect(root, (file_node,), rules, source, declarations)
    logger.debug("Extracted %d declarations from %s", len(declarations), path)
    return declarations


def python_package_name(file_path: Path, source_root: Path) -> str:
    try:
        relative = file_path.resolve().parent.relative_to(source_root.resolve())
    except ValueError:
        logger.warning("%s is outside source root %s, using the default package", file_path, source_root)
        return ""
    return ".".join(relative.parts)


def extract_declarations_from_file(
    path: str,
    language: str | None = None,
    source_root: str | None = None,
) -> list[SyntaxNode]:
    file_path = Path(path)
    resolved_language = resolve_language(language, file_path)

    try:
        source_bytes = file_path.read_bytes()
    except FileNotFoundError:
        raise FileNotFoundError(f"File not found: {path}") from None

    package = python_package_name(file_path, Path(source_root)) if source_root else None
    return extract_declarations_from_source(source_bytes, path, resolved_language, package)


def _newline_offsets(text: str) -> list[int]:
    return [index for index, char in enumerate(text) if char == "\n"]


def _line_of(newlines: list[int], offset: int) -> int:
    return bisect.bisect_left(newlines, offset) + 1


def declaration_at_line(declarations: list[SyntaxNode], line: int) -> SyntaxNode | None:
    """Innermost declaration covering a 1-based line.

    Declarations come in document order, so the last one that covers the
    line is the innermost.
    """
    found: SyntaxNode | None = None
    newlines_by_text: dict[int, list[int]] = {}
    for node in declarations:
        file = node.containing_file
        text = file.raw_text if file is not None else node.raw_text
        newlines = newlines_by_text.get(id(text))
        if newlines is None:
            newlines = newlines_by_text[id(text)] = _newline_offsets(text)
        if _line_of(newlines, node.text_span.start) <= line <= _line_of(newlines, node.text_span.end):
            found = node
    return found
