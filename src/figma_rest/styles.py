"""Figma API - Style Methods.

Methods for working with published styles.
"""
from typing import Optional

from .client import FigmaClient, pagination_params
from .models import FileStylesResponse, StyleResponse, TeamStylesResponse


async def figma_get_team_styles(
    client: FigmaClient,
    team_id: str,
    page_size: Optional[int] = None,
    cursor: Optional[dict] = None
) -> TeamStylesResponse:
    """Get styles in a team library.

    Args:
        client: Figma API client
        team_id: Team ID
        page_size: Number of results (server default 30)
        cursor: Pagination cursor, {"before": int} or {"after": int}

    Returns:
        List of team styles
    """
    data = await client.get(
        f"teams/{team_id}/styles",
        params=pagination_params(page_size, cursor)
    )
    return TeamStylesResponse.model_validate(data)


async def figma_get_file_styles(client: FigmaClient, file_key: str) -> FileStylesResponse:
    """Get styles in a file.

    Args:
        client: Figma API client
        file_key: The file key

    Returns:
        List of styles with metadata
    """
    data = await client.get(f"files/{file_key}/styles")
    return FileStylesResponse.model_validate(data)


async def figma_get_style(client: FigmaClient, style_key: str) -> StyleResponse:
    """Get a style by key.

    Args:
        client: Figma API client
        style_key: Style key

    Returns:
        Style data
    """
    data = await client.get(f"styles/{style_key}")
    return StyleResponse.model_validate(data)
