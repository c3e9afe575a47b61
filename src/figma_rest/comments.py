"""Figma API - Comment Methods.

Methods for working with comments and reactions.
"""
from typing import Optional, Union

from .client import FigmaClient, build_params
from .models import (
    Comment,
    CommentsResponse,
    FrameOffset,
    ReactionsResponse,
    RestModel,
    StatusResponse,
    Vector,
)


ClientMetaParam = Union[Vector, FrameOffset, dict]


async def figma_get_comments(
    client: FigmaClient,
    file_key: str,
    as_md: Optional[bool] = None
) -> CommentsResponse:
    """Get comments in a Figma file.

    Args:
        client: Figma API client
        file_key: The file key
        as_md: Return comments as markdown

    Returns:
        List of comments
    """
    params = build_params(as_md=as_md)
    data = await client.get(f"files/{file_key}/comments", params=params)
    return CommentsResponse.model_validate(data)


async def figma_post_comment(
    client: FigmaClient,
    file_key: str,
    message: str,
    client_meta: Optional[ClientMetaParam] = None,
    comment_id: Optional[str] = None
) -> Comment:
    """Add a comment to a Figma file.

    Args:
        client: Figma API client
        file_key: The file key
        message: Comment text
        client_meta: Canvas position (Vector) or position within a frame (FrameOffset)
        comment_id: Root comment ID to reply to; replies cannot be replied to

    Returns:
        Created comment data
    """
    data = {"message": message}
    if client_meta is not None:
        if isinstance(client_meta, RestModel):
            client_meta = client_meta.to_dict()
        data["client_meta"] = client_meta
    if comment_id:
        data["comment_id"] = comment_id

    response = await client.post(f"files/{file_key}/comments", json_data=data)
    return Comment.model_validate(response)


async def figma_delete_comment(client: FigmaClient, file_key: str, comment_id: str) -> StatusResponse:
    """Delete a comment from a Figma file.

    Only the author of a comment can delete it.

    Args:
        client: Figma API client
        file_key: The file key
        comment_id: Comment ID to delete

    Returns:
        Status of the deletion
    """
    data = await client.delete(f"files/{file_key}/comments/{comment_id}")
    return StatusResponse.model_validate(data)


async def figma_get_comment_reactions(
    client: FigmaClient,
    file_key: str,
    comment_id: str,
    cursor: Optional[str] = None
) -> ReactionsResponse:
    """Get reactions for a comment.

    Args:
        client: Figma API client
        file_key: The file key
        comment_id: Comment ID
        cursor: Pagination cursor

    Returns:
        List of reactions
    """
    params = build_params(cursor=cursor)
    data = await client.get(f"files/{file_key}/comments/{comment_id}/reactions", params=params)
    return ReactionsResponse.model_validate(data)


async def figma_post_comment_reaction(
    client: FigmaClient,
    file_key: str,
    comment_id: str,
    emoji: str
) -> StatusResponse:
    """Add a reaction to a comment.

    Args:
        client: Figma API client
        file_key: The file key
        comment_id: Comment ID
        emoji: Emoji shortcode (e.g. ":heart:")

    Returns:
        Status of the request
    """
    data = await client.post(
        f"files/{file_key}/comments/{comment_id}/reactions",
        json_data={"emoji": emoji}
    )
    return StatusResponse.model_validate(data)


async def figma_delete_comment_reaction(
    client: FigmaClient,
    file_key: str,
    comment_id: str,
    emoji: str
) -> StatusResponse:
    """Delete a reaction from a comment.

    Args:
        client: Figma API client
        file_key: The file key
        comment_id: Comment ID
        emoji: Emoji to remove

    Returns:
        Status of the request
    """
    # The emoji is passed as a query parameter on deletion
    data = await client.delete(
        f"files/{file_key}/comments/{comment_id}/reactions",
        params=build_params(emoji=emoji)
    )
    return StatusResponse.model_validate(data)
