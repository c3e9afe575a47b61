"""Figma API - Component Methods.

Methods for working with published components and component sets.
"""
from typing import Optional

from .client import FigmaClient, pagination_params
from .models import (
    ComponentResponse,
    ComponentSetResponse,
    FileComponentSetsResponse,
    FileComponentsResponse,
    TeamComponentSetsResponse,
    TeamComponentsResponse,
)


async def figma_get_team_components(
    client: FigmaClient,
    team_id: str,
    page_size: Optional[int] = None,
    cursor: Optional[dict] = None
) -> TeamComponentsResponse:
    """Get components in a team library.

    Args:
        client: Figma API client
        team_id: Team ID
        page_size: Number of results (server default 30)
        cursor: Pagination cursor, {"before": int} or {"after": int}

    Returns:
        List of team components and the cursor of the next page
    """
    data = await client.get(
        f"teams/{team_id}/components",
        params=pagination_params(page_size, cursor)
    )
    return TeamComponentsResponse.model_validate(data)


async def figma_get_file_components(client: FigmaClient, file_key: str) -> FileComponentsResponse:
    """Get components in a file.

    Args:
        client: Figma API client
        file_key: The file key

    Returns:
        List of components with metadata
    """
    data = await client.get(f"files/{file_key}/components")
    return FileComponentsResponse.model_validate(data)


async def figma_get_component(client: FigmaClient, component_key: str) -> ComponentResponse:
    """Get a component by key.

    Args:
        client: Figma API client
        component_key: Component key

    Returns:
        Component data
    """
    data = await client.get(f"components/{component_key}")
    return ComponentResponse.model_validate(data)


async def figma_get_team_component_sets(
    client: FigmaClient,
    team_id: str,
    page_size: Optional[int] = None,
    cursor: Optional[dict] = None
) -> TeamComponentSetsResponse:
    """Get component sets in a team library.

    Args:
        client: Figma API client
        team_id: Team ID
        page_size: Number of results
        cursor: Pagination cursor

    Returns:
        List of component sets
    """
    data = await client.get(
        f"teams/{team_id}/component_sets",
        params=pagination_params(page_size, cursor)
    )
    return TeamComponentSetsResponse.model_validate(data)


async def figma_get_file_component_sets(client: FigmaClient, file_key: str) -> FileComponentSetsResponse:
    """Get component sets in a file.

    Args:
        client: Figma API client
        file_key: The file key

    Returns:
        List of component sets
    """
    data = await client.get(f"files/{file_key}/component_sets")
    return FileComponentSetsResponse.model_validate(data)


async def figma_get_component_set(client: FigmaClient, component_set_key: str) -> ComponentSetResponse:
    """Get a component set by key.

    Args:
        client: Figma API client
        component_set_key: Component set key

    Returns:
        Component set data
    """
    data = await client.get(f"component_set/{component_set_key}")
    return ComponentSetResponse.model_validate(data)
