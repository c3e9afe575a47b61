"""Figma API - Team and Project Methods.

Methods for working with teams and projects.
"""
from typing import Optional

from .client import FigmaClient, build_params
from .models import ProjectFilesResponse, TeamProjectsResponse


async def figma_get_team_projects(client: FigmaClient, team_id: str) -> TeamProjectsResponse:
    """Get projects in a team.

    Only projects visible to the authenticated user are listed.

    Args:
        client: Figma API client
        team_id: Team ID

    Returns:
        List of projects
    """
    data = await client.get(f"teams/{team_id}/projects")
    return TeamProjectsResponse.model_validate(data)


async def figma_get_project_files(
    client: FigmaClient,
    project_id: str,
    branch_data: Optional[bool] = None
) -> ProjectFilesResponse:
    """Get files in a project.

    Args:
        client: Figma API client
        project_id: Project ID
        branch_data: Include branch metadata

    Returns:
        List of files in project
    """
    params = build_params(branch_data=branch_data)
    data = await client.get(f"projects/{project_id}/files", params=params)
    return ProjectFilesResponse.model_validate(data)
