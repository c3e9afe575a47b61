"""Figma REST API Client.

Typed async client for the Figma REST API: one method per endpoint, each
issuing a single request and returning the response decoded into the
pydantic models of ``figma_rest.models``.
"""

# Base client
from .client import (
    FigmaClient,
    build_params,
    encode_query,
    pagination_params,
)
from .config import ClientOptions
from .errors import FigmaAPIError

# File methods
from .files import (
    figma_get_file,
    figma_get_file_nodes,
    figma_get_images,
    figma_get_image_fills,
    figma_get_file_versions,
)

# Comment methods
from .comments import (
    figma_get_comments,
    figma_post_comment,
    figma_delete_comment,
    figma_get_comment_reactions,
    figma_post_comment_reaction,
    figma_delete_comment_reaction,
)

# User methods
from .users import figma_get_me

# Team and project methods
from .teams import (
    figma_get_team_projects,
    figma_get_project_files,
)

# Component methods
from .components import (
    figma_get_team_components,
    figma_get_file_components,
    figma_get_component,
    figma_get_team_component_sets,
    figma_get_file_component_sets,
    figma_get_component_set,
)

# Style methods
from .styles import (
    figma_get_team_styles,
    figma_get_file_styles,
    figma_get_style,
)

# Tree helpers
from .tree import (
    walk,
    find_nodes,
    find_by_name,
    collect_text,
)


__all__ = [
    # Client
    "FigmaClient",
    "ClientOptions",
    "FigmaAPIError",
    "build_params",
    "encode_query",
    "pagination_params",
    # Files
    "figma_get_file",
    "figma_get_file_nodes",
    "figma_get_images",
    "figma_get_image_fills",
    "figma_get_file_versions",
    # Comments
    "figma_get_comments",
    "figma_post_comment",
    "figma_delete_comment",
    "figma_get_comment_reactions",
    "figma_post_comment_reaction",
    "figma_delete_comment_reaction",
    # Users
    "figma_get_me",
    # Teams
    "figma_get_team_projects",
    "figma_get_project_files",
    # Components
    "figma_get_team_components",
    "figma_get_file_components",
    "figma_get_component",
    "figma_get_team_component_sets",
    "figma_get_file_component_sets",
    "figma_get_component_set",
    # Styles
    "figma_get_team_styles",
    "figma_get_file_styles",
    "figma_get_style",
    # Tree
    "walk",
    "find_nodes",
    "find_by_name",
    "collect_text",
]
