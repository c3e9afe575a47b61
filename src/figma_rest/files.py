"""Figma API - File Methods.

Methods for working with Figma files, nodes and rendered images.
"""
from typing import Optional, Sequence

from .client import FigmaClient, build_params
from .models import (
    FileImageFillsResponse,
    FileImageResponse,
    FileNodesResponse,
    FileResponse,
    FileVersionsResponse,
)


IMAGE_FORMATS = ("jpg", "png", "svg", "pdf")


def _id_list(ids: Sequence[str]) -> list:
    if isinstance(ids, str):
        return [ids] if ids else []
    return list(ids)


def _require_ids(ids: Sequence[str]) -> list:
    ids = _id_list(ids)
    if not ids:
        raise ValueError("ids must contain at least one node ID")
    return ids


async def figma_get_file(
    client: FigmaClient,
    file_key: str,
    ids: Optional[Sequence[str]] = None,
    version: Optional[str] = None,
    depth: Optional[int] = None,
    geometry: Optional[str] = None,
    plugin_data: Optional[str] = None,
    branch_data: Optional[bool] = None
) -> FileResponse:
    """Get a Figma file by key.

    The file key can be parsed from any Figma file URL:
    https://www.figma.com/file/:key/:title.

    Args:
        client: Figma API client
        file_key: The file key (from URL)
        ids: Only return these nodes, their children and their ancestors
        version: Specific version ID
        depth: Depth of node tree to return (1 returns only pages)
        geometry: Include path data ("paths")
        plugin_data: Plugin IDs (or "shared") whose data to include
        branch_data: Include branch metadata

    Returns:
        File document data
    """
    params = build_params(
        ids=_id_list(ids) if ids else None,
        version=version,
        depth=depth,
        geometry=geometry,
        plugin_data=plugin_data,
        branch_data=branch_data,
    )
    data = await client.get(f"files/{file_key}", params=params)
    return FileResponse.model_validate(data)


async def figma_get_file_nodes(
    client: FigmaClient,
    file_key: str,
    ids: Sequence[str],
    version: Optional[str] = None,
    depth: Optional[int] = None,
    geometry: Optional[str] = None,
    plugin_data: Optional[str] = None
) -> FileNodesResponse:
    """Get specific nodes from a Figma file.

    Args:
        client: Figma API client
        file_key: The file key
        ids: List of node IDs to retrieve
        version: Specific version ID
        depth: Depth of node tree
        geometry: Include path data
        plugin_data: Plugin data to include

    Returns:
        Requested nodes keyed by ID; missing nodes map to None
    """
    params = build_params(
        ids=_require_ids(ids),
        version=version,
        depth=depth,
        geometry=geometry,
        plugin_data=plugin_data,
    )
    data = await client.get(f"files/{file_key}/nodes", params=params)
    return FileNodesResponse.model_validate(data)


async def figma_get_images(
    client: FigmaClient,
    file_key: str,
    ids: Sequence[str],
    scale: Optional[float] = None,
    format: Optional[str] = None,
    svg_include_id: Optional[bool] = None,
    svg_simplify_stroke: Optional[bool] = None,
    use_absolute_bounds: Optional[bool] = None,
    version: Optional[str] = None
) -> FileImageResponse:
    """Render images from a Figma file.

    The scale range is validated by the service, not here.

    Args:
        client: Figma API client
        file_key: The file key
        ids: Node IDs to render
        scale: Scale factor (0.01-4)
        format: Image format (jpg, png, svg, pdf)
        svg_include_id: Include node IDs in SVG
        svg_simplify_stroke: Simplify strokes in SVG
        use_absolute_bounds: Use absolute bounds
        version: Specific version

    Returns:
        Image URLs keyed by node ID; failed renders map to None
    """
    if format is not None and format not in IMAGE_FORMATS:
        raise ValueError(f"format must be one of {', '.join(IMAGE_FORMATS)}, got {format!r}")

    params = build_params(
        ids=_require_ids(ids),
        scale=scale,
        format=format,
        svg_include_id=svg_include_id,
        svg_simplify_stroke=svg_simplify_stroke,
        use_absolute_bounds=use_absolute_bounds,
        version=version,
    )
    data = await client.get(f"images/{file_key}", params=params)
    return FileImageResponse.model_validate(data)


async def figma_get_image_fills(client: FigmaClient, file_key: str) -> FileImageFillsResponse:
    """Get download links for all image fills in a Figma file.

    Args:
        client: Figma API client
        file_key: The file key

    Returns:
        Image fill URLs keyed by image reference
    """
    data = await client.get(f"files/{file_key}/images")
    return FileImageFillsResponse.model_validate(data)


async def figma_get_file_versions(client: FigmaClient, file_key: str) -> FileVersionsResponse:
    """Get version history of a Figma file.

    Args:
        client: Figma API client
        file_key: The file key

    Returns:
        List of file versions with metadata
    """
    data = await client.get(f"files/{file_key}/versions")
    return FileVersionsResponse.model_validate(data)
