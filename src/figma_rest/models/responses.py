"""Figma API response envelopes.

One model per endpoint payload. Timestamps are kept as the ISO 8601
strings the API sends.
"""
from typing import Dict, List, Literal, Optional, Union

from pydantic import Field

from .base import FigmaModel, RestModel
from .nodes import DocumentNode, Node
from .properties import Color, FrameOffset, StyleType, Vector


# ---------------------------------------------------------------------------
# Users and comments
# ---------------------------------------------------------------------------


class User(RestModel):
    """A description of a user."""

    id: Optional[str] = None
    handle: str
    img_url: str


class CurrentUser(User):
    """The authenticated user, as returned by GET /v1/me."""

    email: str


PinCorner = Union[Literal["top-left", "top-right", "bottom-left", "bottom-right"], str]


class Region(RestModel):
    """A canvas region a comment is pinned to."""

    x: float
    y: float
    region_height: float
    region_width: float
    comment_pin_corner: PinCorner = "bottom-right"


class FrameOffsetRegion(RestModel):
    """A region relative to a frame a comment is pinned to."""

    node_id: str
    node_offset: Vector
    region_height: float
    region_width: float
    comment_pin_corner: PinCorner = "bottom-right"


ClientMeta = Union[FrameOffsetRegion, Region, FrameOffset, Vector]


class Reaction(RestModel):
    user: User
    emoji: str
    created_at: str


class Comment(RestModel):
    """A comment or reply left by a user.

    parent_id is set on replies; order_id only on top level comments.
    """

    id: str
    file_key: str
    parent_id: Optional[str] = None
    user: User
    created_at: str
    resolved_at: Optional[str] = None
    message: str
    client_meta: Optional[ClientMeta] = None
    order_id: Optional[Union[int, str]] = None
    reactions: List[Reaction] = Field(default_factory=list)


class CommentsResponse(RestModel):
    comments: List[Comment] = Field(default_factory=list)


class Pagination(RestModel):
    prev_page: Optional[str] = None
    next_page: Optional[str] = None


class ReactionsResponse(RestModel):
    reactions: List[Reaction] = Field(default_factory=list)
    pagination: Optional[Pagination] = None


class StatusResponse(RestModel):
    """A bare status payload, as returned by mutating endpoints."""

    status: Optional[int] = None
    error: bool = False


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------


class DocumentationLink(FigmaModel):
    uri: str


class Component(FigmaModel):
    """A description of a main component, keyed by node id in a file."""

    key: str
    name: str
    description: str = ""
    component_set_id: Optional[str] = None
    documentation_links: List[DocumentationLink] = Field(default_factory=list)
    remote: bool = False


class ComponentSet(FigmaModel):
    key: str
    name: str
    description: str = ""
    documentation_links: List[DocumentationLink] = Field(default_factory=list)
    remote: bool = False


class Style(FigmaModel):
    """A named set of reusable properties, keyed by node id in a file."""

    key: str
    name: str
    description: str = ""
    remote: bool = False
    style_type: Union[StyleType, str] = Field(union_mode="left_to_right")


# Documented values; others decode as plain strings
EditorType = Union[Literal["figma", "figjam"], str]
Role = Union[Literal["owner", "editor", "viewer"], str]


class FileResponse(FigmaModel):
    """Response from GET /v1/files/{key}.

    ``document`` is the root of the node tree.
    """

    name: str
    role: Optional[Role] = None
    last_modified: str
    editor_type: Optional[EditorType] = None
    thumbnail_url: Optional[str] = None
    version: Optional[str] = None
    link_access: Optional[str] = None
    document: DocumentNode
    components: Dict[str, Component] = Field(default_factory=dict)
    component_sets: Dict[str, ComponentSet] = Field(default_factory=dict)
    schema_version: int = 0
    styles: Dict[str, Style] = Field(default_factory=dict)
    main_file_key: Optional[str] = None


class FileNode(FigmaModel):
    """One requested subtree of a GET /v1/files/{key}/nodes response."""

    document: Node
    components: Dict[str, Component] = Field(default_factory=dict)
    component_sets: Dict[str, ComponentSet] = Field(default_factory=dict)
    schema_version: int = 0
    styles: Dict[str, Style] = Field(default_factory=dict)


class FileNodesResponse(FigmaModel):
    """Response from GET /v1/files/{key}/nodes.

    A requested id maps to ``None`` when the node does not exist.
    """

    name: str
    role: Optional[Role] = None
    last_modified: str
    editor_type: Optional[EditorType] = None
    thumbnail_url: Optional[str] = None
    version: Optional[str] = None
    err: Optional[str] = None
    nodes: Dict[str, Optional[FileNode]] = Field(default_factory=dict)


class FileImageResponse(FigmaModel):
    """Response from GET /v1/images/{key}.

    Every requested id is present in ``images``; a ``None`` value means
    rendering that node failed.
    """

    err: Optional[str] = None
    images: Dict[str, Optional[str]] = Field(default_factory=dict)
    status: Optional[int] = None


class ImageFillsMeta(FigmaModel):
    images: Dict[str, str] = Field(default_factory=dict)


class FileImageFillsResponse(FigmaModel):
    """Response from GET /v1/files/{key}/images.

    Maps image references (``Paint.image_ref``) to download URLs. The URLs
    expire after no more than 14 days.
    """

    error: bool = False
    status: Optional[int] = None
    meta: ImageFillsMeta = Field(default_factory=ImageFillsMeta)


class Version(RestModel):
    """A version of a file."""

    id: str
    created_at: str
    label: Optional[str] = None
    description: Optional[str] = None
    user: User
    thumbnail_url: Optional[str] = None


class FileVersionsResponse(RestModel):
    versions: List[Version] = Field(default_factory=list)
    pagination: Optional[Pagination] = None


# ---------------------------------------------------------------------------
# Teams and projects
# ---------------------------------------------------------------------------


class ProjectSummary(RestModel):
    id: Union[int, str]
    name: str


class FileSummary(RestModel):
    key: str
    name: str
    thumbnail_url: Optional[str] = None
    last_modified: str


class TeamProjectsResponse(RestModel):
    name: Optional[str] = None
    projects: List[ProjectSummary] = Field(default_factory=list)


class ProjectFilesResponse(RestModel):
    name: Optional[str] = None
    files: List[FileSummary] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Library components and styles
# ---------------------------------------------------------------------------


class Cursor(RestModel):
    """Pagination markers of a library listing."""

    before: Optional[int] = None
    after: Optional[int] = None


class ContainingStateGroup(FigmaModel):
    name: str
    node_id: str


class FrameInfo(FigmaModel):
    """The frame a published component lives in."""

    node_id: Optional[str] = None
    name: Optional[str] = None
    background_color: Optional[Union[Color, str]] = None
    page_id: str
    page_name: str
    containing_state_group: Optional[ContainingStateGroup] = None


class LibraryItem(RestModel):
    key: str
    file_key: str
    node_id: str
    thumbnail_url: Optional[str] = None
    name: str
    description: str = ""
    created_at: str
    updated_at: str
    user: User


class ComponentMetadata(LibraryItem):
    """A published component."""

    containing_frame: Optional[FrameInfo] = None


class ComponentSetMetadata(LibraryItem):
    """A published component set."""

    containing_frame: Optional[FrameInfo] = None


class StyleMetadata(LibraryItem):
    """A published style."""

    style_type: Union[StyleType, str] = Field(union_mode="left_to_right")
    sort_position: Optional[str] = None


class LibraryResponse(RestModel):
    """Envelope shared by library endpoints, which embed status and error flags."""

    status: Optional[int] = None
    error: bool = False


class ComponentsMeta(RestModel):
    components: List[ComponentMetadata] = Field(default_factory=list)
    cursor: Optional[Cursor] = None


class ComponentSetsMeta(RestModel):
    component_sets: List[ComponentSetMetadata] = Field(default_factory=list)
    cursor: Optional[Cursor] = None


class StylesMeta(RestModel):
    styles: List[StyleMetadata] = Field(default_factory=list)
    cursor: Optional[Cursor] = None


class TeamComponentsResponse(LibraryResponse):
    meta: ComponentsMeta = Field(default_factory=ComponentsMeta)


class FileComponentsResponse(LibraryResponse):
    meta: ComponentsMeta = Field(default_factory=ComponentsMeta)


class ComponentResponse(LibraryResponse):
    meta: ComponentMetadata


class TeamComponentSetsResponse(LibraryResponse):
    meta: ComponentSetsMeta = Field(default_factory=ComponentSetsMeta)


class FileComponentSetsResponse(LibraryResponse):
    meta: ComponentSetsMeta = Field(default_factory=ComponentSetsMeta)


class ComponentSetResponse(LibraryResponse):
    meta: ComponentSetMetadata


class TeamStylesResponse(LibraryResponse):
    meta: StylesMeta = Field(default_factory=StylesMeta)


class FileStylesResponse(LibraryResponse):
    meta: StylesMeta = Field(default_factory=StylesMeta)


class StyleResponse(LibraryResponse):
    meta: StyleMetadata
