from enum import Enum

from pydantic import BaseModel, ConfigDict


class NodeKind(str, Enum):
    FILE = "file"
    CLASS_OR_OBJECT = "class_or_object"
    FUNCTION = "function"
    OTHER = "other"


class Position(BaseModel):
    model_config = ConfigDict(frozen=True)

    row: int
    column: int


class TextSpan(BaseModel):
    """Character offsets into the owning file's source text."""

    model_config = ConfigDict(frozen=True)

    start: int
    end: int


class SyntaxNode(BaseModel):
    """Read-only view of one element of a parsed source file.

    ``parents`` holds the enclosing declarations, innermost first.
    """

    model_config = ConfigDict(frozen=True)

    kind: NodeKind
    text_span: TextSpan
    raw_text: str
    name: str | None = None
    start_offset_skipping_comments: int | None = None
    parents: tuple["SyntaxNode", ...] = ()
    start_point: Position | None = None

    # functions
    parameter_list_span: TextSpan | None = None
    return_type_span: TextSpan | None = None

    # classes and objects
    type_parameters: tuple[str, ...] = ()
    supertypes: tuple[str | None, ...] = ()

    # files
    package_name: str = ""
    file_display_name: str | None = None

    @property
    def content_start(self) -> int:
        if self.start_offset_skipping_comments is None:
            return self.text_span.start
        return self.start_offset_skipping_comments

    @property
    def containing_file(self) -> "SyntaxNode | None":
        if self.kind is NodeKind.FILE:
            return self
        return next((p for p in self.parents if p.kind is NodeKind.FILE), None)


SyntaxNode.model_rebuild()  # necessary for recursive types


class Location(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    line: int
    column: int


class Entity(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    signature: str
    location: Location


class Finding(BaseModel):
    model_config = ConfigDict(frozen=True)

    rule_id: str
    entity: Entity
    message: str = ""
