"""Figma API - User Methods."""
from .client import FigmaClient
from .models import CurrentUser


async def figma_get_me(client: FigmaClient) -> CurrentUser:
    """Get the user the client is authenticated as."""
    data = await client.get("me")
    return CurrentUser.model_validate(data)
