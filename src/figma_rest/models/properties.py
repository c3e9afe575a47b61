"""Figma property types.

Style primitives shared by nodes and styles: colors, geometry, layout
constraints, export settings, layout grids, effects, paints and typography.

Reference: https://www.figma.com/developers/api#property-types
"""
from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import Discriminator, Field, Tag

from .base import FigmaModel, RestModel


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class BlendMode(str, Enum):
    """How a layer blends with layers below it."""

    PASS_THROUGH = "PASS_THROUGH"  # only applicable to objects with children
    NORMAL = "NORMAL"
    DARKEN = "DARKEN"
    MULTIPLY = "MULTIPLY"
    LINEAR_BURN = "LINEAR_BURN"
    COLOR_BURN = "COLOR_BURN"
    LIGHTEN = "LIGHTEN"
    SCREEN = "SCREEN"
    LINEAR_DODGE = "LINEAR_DODGE"
    COLOR_DODGE = "COLOR_DODGE"
    OVERLAY = "OVERLAY"
    SOFT_LIGHT = "SOFT_LIGHT"
    HARD_LIGHT = "HARD_LIGHT"
    DIFFERENCE = "DIFFERENCE"
    EXCLUSION = "EXCLUSION"
    HUE = "HUE"
    SATURATION = "SATURATION"
    COLOR = "COLOR"
    LUMINOSITY = "LUMINOSITY"


class EasingType(str, Enum):
    """Animation easing curves."""

    EASE_IN = "EASE_IN"
    EASE_OUT = "EASE_OUT"
    EASE_IN_AND_OUT = "EASE_IN_AND_OUT"
    LINEAR = "LINEAR"


class StyleType(str, Enum):
    FILL = "FILL"
    TEXT = "TEXT"
    EFFECT = "EFFECT"
    GRID = "GRID"


# Documented values of string-valued fields. The API keeps adding values,
# so anything else is accepted and kept as a plain string.
StrokeAlign = Union[Literal["INSIDE", "OUTSIDE", "CENTER"], str]
StrokeCap = Union[
    Literal[
        "NONE",
        "ROUND",
        "SQUARE",
        "LINE_ARROW",
        "TRIANGLE_ARROW",
        "CIRCLE_FILLED",
        "DIAMOND_FILLED",
        "TRIANGLE_FILLED",
    ],
    str,
]
StrokeJoin = Union[Literal["MITER", "BEVEL", "ROUND"], str]
LayoutAlign = Union[Literal["INHERIT", "STRETCH", "MIN", "CENTER", "MAX"], str]
ExportFormat = Union[Literal["JPG", "PNG", "SVG", "PDF"], str]
GradientType = Union[
    Literal[
        "GRADIENT_LINEAR",
        "GRADIENT_RADIAL",
        "GRADIENT_ANGULAR",
        "GRADIENT_DIAMOND",
    ],
    str,
]
EffectType = Union[Literal["INNER_SHADOW", "DROP_SHADOW", "LAYER_BLUR", "BACKGROUND_BLUR"], str]
ScaleMode = Union[Literal["FILL", "FIT", "TILE", "STRETCH"], str]
WindingRule = Union[Literal["EVENODD", "NONZERO"], str]
VerticalConstraint = Union[Literal["TOP", "BOTTOM", "CENTER", "TOP_BOTTOM", "SCALE"], str]
HorizontalConstraint = Union[Literal["LEFT", "RIGHT", "CENTER", "LEFT_RIGHT", "SCALE"], str]
LayoutGridPattern = Union[Literal["COLUMNS", "ROWS", "GRID"], str]
LayoutGridAlignment = Union[Literal["MIN", "STRETCH", "CENTER", "MAX"], str]
ConstraintType = Union[Literal["SCALE", "WIDTH", "HEIGHT"], str]
HyperlinkType = Union[Literal["URL", "NODE"], str]
TextCase = Union[Literal["ORIGINAL", "UPPER", "LOWER", "TITLE", "SMALL_CAPS", "SMALL_CAPS_FORCED"], str]
TextDecoration = Union[Literal["NONE", "STRIKETHROUGH", "UNDERLINE"], str]
TextAutoResize = Union[Literal["NONE", "HEIGHT", "WIDTH_AND_HEIGHT", "TRUNCATE"], str]
TextAlignHorizontal = Union[Literal["LEFT", "RIGHT", "CENTER", "JUSTIFIED"], str]
TextAlignVertical = Union[Literal["TOP", "CENTER", "BOTTOM"], str]
LineHeightUnit = Union[Literal["PIXELS", "FONT_SIZE_%", "INTRINSIC_%"], str]

# Image formats accepted by the image export endpoint
ImageFormat = Literal["jpg", "png", "svg", "pdf"]

# A 2x3 affine transformation matrix
Transform = List[List[float]]

# Map from a style slot ("fill", "stroke", "text", ...) to a style id
StylesMap = Dict[str, str]


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------


class Color(FigmaModel):
    """An RGBA color, each channel between 0 and 1."""

    r: float
    g: float
    b: float
    a: float


class Vector(FigmaModel):
    """A 2d vector."""

    x: float
    y: float


class Rectangle(FigmaModel):
    """A bounding box in absolute coordinates."""

    x: float
    y: float
    width: float
    height: float


class FrameOffset(RestModel):
    """A position relative to the top left corner of a frame."""

    node_id: str
    node_offset: Vector


class Path(FigmaModel):
    """An SVG path with its fill rule."""

    path: str
    winding_rule: WindingRule = "NONZERO"


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


class LayoutConstraint(FigmaModel):
    """Layout constraint relative to the containing frame.

    vertical:
        "TOP", "BOTTOM", "CENTER", "TOP_BOTTOM" (stretches with the frame)
        or "SCALE".
    horizontal:
        "LEFT", "RIGHT", "CENTER", "LEFT_RIGHT" (stretches with the frame)
        or "SCALE".
    """

    vertical: VerticalConstraint
    horizontal: HorizontalConstraint


class LayoutGrid(FigmaModel):
    """Guides to align and place objects within a frame.

    pattern is "COLUMNS" (vertical grid), "ROWS" (horizontal grid) or
    "GRID" (square grid). alignment only applies to COLUMNS and ROWS.
    """

    pattern: LayoutGridPattern
    section_size: float
    visible: bool = True
    color: Color
    alignment: LayoutGridAlignment = "MIN"
    gutter_size: float = 0
    offset: float = 0
    count: int = 0


class Constraint(FigmaModel):
    """Sizing constraint for exports.

    "SCALE" scales by value, "WIDTH" and "HEIGHT" scale proportionally so
    that the width or height equals value.
    """

    type: ConstraintType
    value: float


class ExportSetting(FigmaModel):
    """Format and size to export an asset at."""

    suffix: str = ""
    format: ExportFormat
    constraint: Constraint


class FlowStartingPoint(FigmaModel):
    """A prototyping flow starting point on a canvas."""

    node_id: str
    name: str


# ---------------------------------------------------------------------------
# Effects
# ---------------------------------------------------------------------------


class Effect(FigmaModel):
    """A visual effect such as a shadow or blur.

    color, blend_mode, offset, spread and show_shadow_behind_node are only
    set on shadows.
    """

    type: EffectType
    visible: bool = True
    radius: float = 0
    color: Optional[Color] = None
    blend_mode: Optional[Union[BlendMode, str]] = Field(default=None, union_mode="left_to_right")
    offset: Optional[Vector] = None
    spread: float = 0
    show_shadow_behind_node: Optional[bool] = None


# ---------------------------------------------------------------------------
# Paints
# ---------------------------------------------------------------------------


class ColorStop(FigmaModel):
    """A position/color pair representing a gradient stop."""

    position: float
    color: Color


class ImageFilters(FigmaModel):
    """Image adjustments applied to an image paint, each between -1 and 1."""

    exposure: float = 0
    contrast: float = 0
    saturation: float = 0
    temperature: float = 0
    tint: float = 0
    highlights: float = 0
    shadows: float = 0


class PaintBase(FigmaModel):
    visible: bool = True
    opacity: float = 1
    blend_mode: Optional[Union[BlendMode, str]] = Field(default=None, union_mode="left_to_right")


class SolidPaint(PaintBase):
    type: Literal["SOLID"]
    color: Color


class GradientPaint(PaintBase):
    """A gradient paint.

    gradient_handle_positions holds three positions in normalized object
    space: the start of the gradient, its end, and a handle setting the
    width of non-linear gradients.
    """

    type: GradientType
    gradient_handle_positions: List[Vector] = Field(default_factory=list)
    gradient_stops: List[ColorStop] = Field(default_factory=list)


class ImagePaint(PaintBase):
    """A paint referencing a user supplied image.

    image_ref is resolved to a download URL by the image fills endpoint.
    """

    type: Literal["IMAGE"]
    scale_mode: Optional[ScaleMode] = None
    image_ref: Optional[str] = None
    image_transform: Optional[Transform] = None
    scaling_factor: Optional[float] = None
    rotation: float = 0
    gif_ref: Optional[str] = None
    filters: Optional[ImageFilters] = None


class EmojiPaint(PaintBase):
    type: Literal["EMOJI"]


class UnknownPaint(PaintBase):
    """A paint whose type this client does not know about."""

    type: str


def _paint_tag(value: Any) -> str:
    paint_type = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    if paint_type == "SOLID":
        return "SOLID"
    if isinstance(paint_type, str) and paint_type.startswith("GRADIENT_"):
        return "GRADIENT"
    if paint_type in ("IMAGE", "EMOJI"):
        return paint_type
    return "UNKNOWN"


Paint = Annotated[
    Union[
        Annotated[SolidPaint, Tag("SOLID")],
        Annotated[GradientPaint, Tag("GRADIENT")],
        Annotated[ImagePaint, Tag("IMAGE")],
        Annotated[EmojiPaint, Tag("EMOJI")],
        Annotated[UnknownPaint, Tag("UNKNOWN")],
    ],
    Discriminator(_paint_tag),
]
"""A solid color, gradient or image that can be applied as a fill or stroke."""


# ---------------------------------------------------------------------------
# Typography
# ---------------------------------------------------------------------------


class Hyperlink(FigmaModel):
    """A link to a URL or to another node."""

    type: HyperlinkType
    url: Optional[str] = None
    node_id: Optional[str] = Field(default=None, alias="nodeID")


class TypeStyle(FigmaModel):
    """Metadata for character formatting."""

    font_family: Optional[str] = None
    font_post_script_name: Optional[str] = None
    paragraph_spacing: float = 0
    paragraph_indent: float = 0
    list_spacing: float = 0
    italic: bool = False
    font_weight: Optional[float] = None
    font_size: Optional[float] = None
    text_case: Optional[TextCase] = None
    text_decoration: Optional[TextDecoration] = None
    text_auto_resize: Optional[TextAutoResize] = None
    text_align_horizontal: Optional[TextAlignHorizontal] = None
    text_align_vertical: Optional[TextAlignVertical] = None
    letter_spacing: float = 0
    fills: List[Paint] = Field(default_factory=list)
    hyperlink: Optional[Hyperlink] = None
    opentype_flags: Dict[str, int] = Field(default_factory=dict)
    line_height_px: Optional[float] = None
    line_height_percent: float = 100
    line_height_percent_font_size: Optional[float] = None
    line_height_unit: Optional[LineHeightUnit] = None
