"""Figma API schema.

Pydantic models mirroring the JSON payloads of the Figma REST API.
"""
from .base import FigmaModel, RestModel
from .properties import (
    BlendMode,
    Color,
    ColorStop,
    Constraint,
    EasingType,
    Effect,
    EmojiPaint,
    ExportSetting,
    FlowStartingPoint,
    FrameOffset,
    GradientPaint,
    Hyperlink,
    ImageFilters,
    ImageFormat,
    ImagePaint,
    LayoutConstraint,
    LayoutGrid,
    Paint,
    Path,
    Rectangle,
    SolidPaint,
    StyleType,
    TypeStyle,
    UnknownPaint,
    Vector,
)
from .nodes import (
    NODE_TYPES,
    BooleanOperationNode,
    CanvasNode,
    ComponentNode,
    ComponentProperty,
    ComponentPropertyDefinition,
    ComponentSetNode,
    DocumentNode,
    EllipseNode,
    FrameNode,
    GroupNode,
    InstanceNode,
    LineNode,
    Node,
    NodeBase,
    NodeType,
    RectangleNode,
    RegularPolygonNode,
    SliceNode,
    StarNode,
    TextNode,
    UnknownNode,
    VectorNode,
)
from .responses import (
    Comment,
    CommentsResponse,
    Component,
    ComponentMetadata,
    ComponentResponse,
    ComponentSet,
    ComponentSetMetadata,
    ComponentSetResponse,
    CurrentUser,
    Cursor,
    FileComponentSetsResponse,
    FileComponentsResponse,
    FileImageFillsResponse,
    FileImageResponse,
    FileNode,
    FileNodesResponse,
    FileResponse,
    FileStylesResponse,
    FileSummary,
    FileVersionsResponse,
    FrameInfo,
    FrameOffsetRegion,
    ProjectFilesResponse,
    ProjectSummary,
    Reaction,
    ReactionsResponse,
    Region,
    StatusResponse,
    Style,
    StyleMetadata,
    StyleResponse,
    TeamComponentSetsResponse,
    TeamComponentsResponse,
    TeamProjectsResponse,
    TeamStylesResponse,
    User,
    Version,
)
