"""List a Figma team's projects and the files of one project.

Usage: python scripts/list_figma_files.py <team-id> [<project-id>]

Reads FIGMA_API_KEY (or FIGMA_ACCESS_TOKEN) from the environment or a
local .env file. This is READ-ONLY - no modifications to Figma files.
"""
import asyncio
import logging
import sys
from typing import Optional

from dotenv import load_dotenv

from figma_rest import (
    FigmaAPIError,
    FigmaClient,
    figma_get_project_files,
    figma_get_team_projects,
)

load_dotenv()


async def main(team_id: str, project_id: Optional[str] = None):
    """List files from a team project."""
    async with FigmaClient.from_env() as client:
        print(f"📁 Team {team_id} projects:")
        print("-" * 50)
        try:
            team_data = await figma_get_team_projects(client, team_id)
            for project in team_data.projects:
                marker = "→" if str(project.id) == project_id else " "
                print(f"  {marker} [{project.id}] {project.name}")
        except FigmaAPIError as e:
            print(f"  ❌ Error: {e.status_code} - {e.message[:100]}")

        if not project_id:
            return

        print()
        print(f"📄 Project {project_id} files:")
        print("-" * 50)
        try:
            project_data = await figma_get_project_files(client, project_id)
            for file in project_data.files:
                print(f"  📄 {file.name}")
                print(f"     Key: {file.key}")
                print(f"     URL: https://www.figma.com/file/{file.key}")
                print(f"     Modified: {file.last_modified}")
                print()
        except FigmaAPIError as e:
            print(f"  ❌ Error: {e.status_code} - {e.message[:100]}")


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python scripts/list_figma_files.py <team-id> [<project-id>]")
        sys.exit(1)

    logging.basicConfig(level=logging.INFO)
    asyncio.run(main(*sys.argv[1:3]))
