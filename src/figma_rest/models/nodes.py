"""Figma node types.

The document tree is a union of node variants keyed on ``type``. Each
variant only declares the fields the API populates for it, so a
RECTANGLE exposes ``corner_radius`` and never ``characters``.

Reference: https://www.figma.com/developers/api#node-types
"""
from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import Discriminator, Field, Tag

from .base import FigmaModel
from .properties import (
    BlendMode,
    Color,
    EasingType,
    Effect,
    ExportSetting,
    FlowStartingPoint,
    LayoutAlign,
    LayoutConstraint,
    LayoutGrid,
    Paint,
    Path,
    Rectangle,
    StrokeAlign,
    StrokeCap,
    StrokeJoin,
    StylesMap,
    Transform,
    TypeStyle,
    Vector,
)


class NodeType(str, Enum):
    DOCUMENT = "DOCUMENT"
    CANVAS = "CANVAS"
    FRAME = "FRAME"
    GROUP = "GROUP"
    VECTOR = "VECTOR"
    BOOLEAN_OPERATION = "BOOLEAN_OPERATION"
    STAR = "STAR"
    LINE = "LINE"
    ELLIPSE = "ELLIPSE"
    REGULAR_POLYGON = "REGULAR_POLYGON"
    RECTANGLE = "RECTANGLE"
    TEXT = "TEXT"
    SLICE = "SLICE"
    COMPONENT = "COMPONENT"
    COMPONENT_SET = "COMPONENT_SET"
    INSTANCE = "INSTANCE"


NODE_TYPES = frozenset(node_type.value for node_type in NodeType)

# Documented values of auto-layout and other string-valued node fields;
# unlisted values decode as plain strings.
LayoutMode = Union[Literal["NONE", "HORIZONTAL", "VERTICAL", "GRID"], str]
LayoutWrap = Union[Literal["NO_WRAP", "WRAP"], str]
AxisSizingMode = Union[Literal["FIXED", "AUTO"], str]
PrimaryAxisAlignItems = Union[Literal["MIN", "CENTER", "MAX", "SPACE_BETWEEN"], str]
CounterAxisAlignItems = Union[Literal["MIN", "CENTER", "MAX", "BASELINE"], str]
OverflowDirection = Union[
    Literal[
        "NONE",
        "HORIZONTAL_SCROLLING",
        "VERTICAL_SCROLLING",
        "HORIZONTAL_AND_VERTICAL_SCROLLING",
    ],
    str,
]
BooleanOperation = Union[Literal["UNION", "INTERSECT", "SUBTRACT", "EXCLUDE"], str]
LineType = Union[Literal["ORDERED", "UNORDERED", "NONE"], str]


# ---------------------------------------------------------------------------
# Shared field groups
# ---------------------------------------------------------------------------


class NodeBase(FigmaModel):
    """Fields present on every node."""

    id: str
    name: str = ""
    visible: bool = True
    plugin_data: Optional[Dict[str, Any]] = None
    shared_plugin_data: Optional[Dict[str, Any]] = None


class LayerFields(NodeBase):
    """Fields shared by every node drawn on a canvas (frames and vectors)."""

    export_settings: List[ExportSetting] = Field(default_factory=list)
    blend_mode: Union[BlendMode, str] = Field(default=BlendMode.NORMAL, union_mode="left_to_right")
    preserve_ratio: bool = False
    constraints: Optional[LayoutConstraint] = None
    layout_align: Optional[LayoutAlign] = None
    layout_grow: float = 0
    transition_node_id: Optional[str] = Field(default=None, alias="transitionNodeID")
    transition_duration: Optional[float] = None
    transition_easing: Optional[Union[EasingType, str]] = Field(default=None, union_mode="left_to_right")
    opacity: float = 1
    absolute_bounding_box: Optional[Rectangle] = None
    absolute_render_bounds: Optional[Rectangle] = None
    size: Optional[Vector] = None
    relative_transform: Optional[Transform] = None
    rotation: float = 0
    effects: List[Effect] = Field(default_factory=list)
    is_mask: bool = False
    styles: StylesMap = Field(default_factory=dict)


class FrameFields(LayerFields):
    """Fields shared by FRAME, GROUP, COMPONENT, COMPONENT_SET and INSTANCE."""

    children: List[Node] = Field(default_factory=list)
    fills: List[Paint] = Field(default_factory=list)
    strokes: List[Paint] = Field(default_factory=list)
    stroke_weight: Optional[float] = None
    stroke_align: Optional[StrokeAlign] = None
    stroke_dashes: List[float] = Field(default_factory=list)
    corner_radius: float = 0
    rectangle_corner_radii: Optional[List[float]] = None
    # Deprecated in favour of fills
    background: List[Paint] = Field(default_factory=list)
    background_color: Optional[Color] = None
    clips_content: bool = False
    layout_mode: LayoutMode = "NONE"
    layout_wrap: LayoutWrap = "NO_WRAP"
    primary_axis_sizing_mode: AxisSizingMode = "AUTO"
    counter_axis_sizing_mode: AxisSizingMode = "AUTO"
    primary_axis_align_items: PrimaryAxisAlignItems = "MIN"
    counter_axis_align_items: CounterAxisAlignItems = "MIN"
    padding_left: float = 0
    padding_right: float = 0
    padding_top: float = 0
    padding_bottom: float = 0
    item_spacing: float = 0
    layout_grids: List[LayoutGrid] = Field(default_factory=list)
    overflow_direction: OverflowDirection = "NONE"
    is_mask_outline: bool = False


class VectorFields(LayerFields):
    """Fields shared by vector-like nodes."""

    fills: List[Paint] = Field(default_factory=list)
    fill_geometry: List[Path] = Field(default_factory=list)
    strokes: List[Paint] = Field(default_factory=list)
    stroke_weight: Optional[float] = None
    stroke_cap: StrokeCap = "NONE"
    stroke_join: StrokeJoin = "MITER"
    stroke_dashes: List[float] = Field(default_factory=list)
    stroke_miter_angle: float = 28.96
    stroke_geometry: List[Path] = Field(default_factory=list)
    stroke_align: Optional[StrokeAlign] = None


# ---------------------------------------------------------------------------
# Component properties
# ---------------------------------------------------------------------------


ComponentPropertyType = Union[Literal["BOOLEAN", "INSTANCE_SWAP", "TEXT", "VARIANT"], str]


class InstanceSwapPreferredValue(FigmaModel):
    type: Union[Literal["COMPONENT", "COMPONENT_SET"], str]
    key: str


class ComponentPropertyDefinition(FigmaModel):
    type: ComponentPropertyType
    default_value: Union[bool, str]
    variant_options: Optional[List[str]] = None
    preferred_values: Optional[List[InstanceSwapPreferredValue]] = None


class ComponentProperty(FigmaModel):
    type: ComponentPropertyType
    value: Union[bool, str]
    preferred_values: Optional[List[InstanceSwapPreferredValue]] = None


# ---------------------------------------------------------------------------
# Node variants
# ---------------------------------------------------------------------------


class DocumentNode(NodeBase):
    """The root node."""

    type: Literal["DOCUMENT"]
    children: List[Node] = Field(default_factory=list)


class CanvasNode(NodeBase):
    """A single page."""

    type: Literal["CANVAS"]
    children: List[Node] = Field(default_factory=list)
    background_color: Optional[Color] = None
    prototype_start_node_id: Optional[str] = Field(default=None, alias="prototypeStartNodeID")
    flow_starting_points: List[FlowStartingPoint] = Field(default_factory=list)
    export_settings: List[ExportSetting] = Field(default_factory=list)


class FrameNode(FrameFields):
    """A node of fixed size containing other nodes."""

    type: Literal["FRAME"]


class GroupNode(FrameFields):
    """A logical grouping of nodes."""

    type: Literal["GROUP"]


class ComponentNode(FrameFields):
    """A node that can have instances created of it."""

    type: Literal["COMPONENT"]
    component_property_definitions: Dict[str, ComponentPropertyDefinition] = Field(default_factory=dict)


class ComponentSetNode(FrameFields):
    """A set of component variants."""

    type: Literal["COMPONENT_SET"]
    component_property_definitions: Dict[str, ComponentPropertyDefinition] = Field(default_factory=dict)


class InstanceNode(FrameFields):
    """An instance of a component.

    component_id refers to the ``components`` table of the file response.
    """

    type: Literal["INSTANCE"]
    component_id: str
    is_exposed_instance: bool = False
    exposed_instances: List[str] = Field(default_factory=list)
    component_properties: Dict[str, ComponentProperty] = Field(default_factory=dict)


class VectorNode(VectorFields):
    """A vector network, consisting of vertices and edges."""

    type: Literal["VECTOR"]


class BooleanOperationNode(VectorFields):
    """A group that has a boolean operation applied to it."""

    type: Literal["BOOLEAN_OPERATION"]
    children: List[Node] = Field(default_factory=list)
    boolean_operation: BooleanOperation = "UNION"


class StarNode(VectorFields):
    type: Literal["STAR"]


class LineNode(VectorFields):
    type: Literal["LINE"]


class ArcData(FigmaModel):
    starting_angle: float
    ending_angle: float
    inner_radius: float


class EllipseNode(VectorFields):
    type: Literal["ELLIPSE"]
    arc_data: Optional[ArcData] = None


class RegularPolygonNode(VectorFields):
    type: Literal["REGULAR_POLYGON"]


class RectangleNode(VectorFields):
    type: Literal["RECTANGLE"]
    corner_radius: float = 0
    rectangle_corner_radii: Optional[List[float]] = None


class TextNode(VectorFields):
    """A text box.

    Each entry of character_style_overrides maps the character at the same
    position to a key of style_override_table. Entries with value 0 (and
    characters past the end of the list) use the node's own style.
    """

    type: Literal["TEXT"]
    characters: str = ""
    style: Optional[TypeStyle] = None
    character_style_overrides: List[int] = Field(default_factory=list)
    style_override_table: Dict[int, TypeStyle] = Field(default_factory=dict)
    line_types: List[LineType] = Field(default_factory=list)
    line_indentations: List[int] = Field(default_factory=list)

    def resolve_style(self, override: int) -> Optional[TypeStyle]:
        """Return the type style for a character style override index."""
        if override == 0:
            return self.style
        return self.style_override_table[override]


class SliceNode(NodeBase):
    """A rectangular region of the canvas that can be exported."""

    type: Literal["SLICE"]
    export_settings: List[ExportSetting] = Field(default_factory=list)
    absolute_bounding_box: Optional[Rectangle] = None
    size: Optional[Vector] = None
    relative_transform: Optional[Transform] = None


class UnknownNode(NodeBase):
    """A node whose type this client does not know about.

    Only the fields shared by every node and its children are decoded.
    """

    type: str
    children: List[Node] = Field(default_factory=list)


def _node_tag(value: Any) -> str:
    node_type = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    if node_type in NODE_TYPES:
        return node_type
    return "UNKNOWN"


Node = Annotated[
    Union[
        Annotated[DocumentNode, Tag("DOCUMENT")],
        Annotated[CanvasNode, Tag("CANVAS")],
        Annotated[FrameNode, Tag("FRAME")],
        Annotated[GroupNode, Tag("GROUP")],
        Annotated[VectorNode, Tag("VECTOR")],
        Annotated[BooleanOperationNode, Tag("BOOLEAN_OPERATION")],
        Annotated[StarNode, Tag("STAR")],
        Annotated[LineNode, Tag("LINE")],
        Annotated[EllipseNode, Tag("ELLIPSE")],
        Annotated[RegularPolygonNode, Tag("REGULAR_POLYGON")],
        Annotated[RectangleNode, Tag("RECTANGLE")],
        Annotated[TextNode, Tag("TEXT")],
        Annotated[SliceNode, Tag("SLICE")],
        Annotated[ComponentNode, Tag("COMPONENT")],
        Annotated[ComponentSetNode, Tag("COMPONENT_SET")],
        Annotated[InstanceNode, Tag("INSTANCE")],
        Annotated[UnknownNode, Tag("UNKNOWN")],
    ],
    Discriminator(_node_tag),
]

# Node is self-referencing through children
for _model in (
    FrameFields,
    DocumentNode,
    CanvasNode,
    FrameNode,
    GroupNode,
    ComponentNode,
    ComponentSetNode,
    InstanceNode,
    BooleanOperationNode,
    UnknownNode,
):
    _model.model_rebuild()
