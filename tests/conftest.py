"""Shared fixtures: a mocked Figma client and captured API payloads."""
import asyncio
import copy
import json

import httpx
import pytest

from figma_rest import ClientOptions, FigmaClient


class RecordingTransport(httpx.MockTransport):
    """Mock transport answering with a canned payload and recording requests."""

    def __init__(self, payload=None, status_code: int = 200):
        self.requests = []
        self.payload = {} if payload is None else payload
        self.status_code = status_code
        super().__init__(self._respond)

    def _respond(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last.content.decode("utf-8"))


def make_client(transport: httpx.MockTransport, **options) -> FigmaClient:
    options.setdefault("personal_access_token", "figd_test")
    return FigmaClient(ClientOptions(**options), transport=transport)


def call(operation, *args, payload=None, status_code: int = 200, **kwargs):
    """Run an endpoint operation against a recording transport.

    Returns the decoded result and the transport.
    """
    transport = RecordingTransport(payload, status_code)

    async def run():
        async with make_client(transport) as client:
            return await operation(client, *args, **kwargs)

    return asyncio.run(run()), transport


USER = {
    "id": "1234",
    "handle": "Ada",
    "img_url": "https://s3-alpha.figma.com/profile/1234",
}


TEXT_NODE = {
    "id": "1:4",
    "name": "Title",
    "type": "TEXT",
    "absoluteBoundingBox": {"x": 16.0, "y": 16.0, "width": 200.0, "height": 24.0},
    "constraints": {"vertical": "TOP", "horizontal": "LEFT"},
    "fills": [
        {"type": "SOLID", "color": {"r": 0.0, "g": 0.0, "b": 0.0, "a": 1.0}},
    ],
    "strokes": [],
    "strokeWeight": 1.0,
    "strokeAlign": "OUTSIDE",
    "effects": [],
    "characters": "Hello world",
    "style": {
        "fontFamily": "Inter",
        "fontPostScriptName": "Inter-Regular",
        "fontWeight": 400,
        "fontSize": 16.0,
        "textAlignHorizontal": "LEFT",
        "textAlignVertical": "TOP",
        "letterSpacing": 0.0,
        "lineHeightPx": 19.36,
        "lineHeightPercent": 100.0,
        "lineHeightUnit": "INTRINSIC_%",
    },
    "characterStyleOverrides": [0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 1],
    "styleOverrideTable": {
        "1": {"fontFamily": "Inter", "fontWeight": 700, "italic": True},
    },
}


RECTANGLE_NODE = {
    "id": "1:5",
    "name": "Background",
    "type": "RECTANGLE",
    "blendMode": "NORMAL",
    "absoluteBoundingBox": {"x": 0.0, "y": 0.0, "width": 320.0, "height": 240.0},
    "constraints": {"vertical": "TOP_BOTTOM", "horizontal": "LEFT_RIGHT"},
    "fills": [
        {
            "type": "GRADIENT_LINEAR",
            "gradientHandlePositions": [
                {"x": 0.0, "y": 0.0},
                {"x": 1.0, "y": 1.0},
                {"x": 0.0, "y": 1.0},
            ],
            "gradientStops": [
                {"position": 0.0, "color": {"r": 1.0, "g": 0.0, "b": 0.0, "a": 1.0}},
                {"position": 1.0, "color": {"r": 0.0, "g": 0.0, "b": 1.0, "a": 1.0}},
            ],
        },
        {"type": "IMAGE", "scaleMode": "FILL", "imageRef": "abc123ref", "opacity": 0.5},
    ],
    "strokes": [],
    "effects": [
        {
            "type": "DROP_SHADOW",
            "visible": True,
            "radius": 4.0,
            "color": {"r": 0.0, "g": 0.0, "b": 0.0, "a": 0.25},
            "blendMode": "NORMAL",
            "offset": {"x": 0.0, "y": 4.0},
        },
    ],
    "cornerRadius": 8.0,
}


INSTANCE_NODE = {
    "id": "1:6",
    "name": "Button",
    "type": "INSTANCE",
    "componentId": "2:1",
    "clipsContent": True,
    "children": [],
}


SECTION_NODE = {
    "id": "1:7",
    "name": "Notes",
    "type": "SECTION",
    "sectionContentsHidden": False,
    "children": [
        {"id": "1:8", "name": "Note", "type": "TEXT", "characters": "  Remember me  "},
    ],
}


FILE_RESPONSE = {
    "name": "Design System",
    "role": "owner",
    "lastModified": "2024-03-01T10:00:00Z",
    "editorType": "figma",
    "thumbnailUrl": "https://s3-alpha.figma.com/thumbnails/abc",
    "version": "5002",
    "document": {
        "id": "0:0",
        "name": "Document",
        "type": "DOCUMENT",
        "children": [
            {
                "id": "0:1",
                "name": "Page 1",
                "type": "CANVAS",
                "backgroundColor": {"r": 0.9, "g": 0.9, "b": 0.9, "a": 1.0},
                "prototypeStartNodeID": None,
                "exportSettings": [],
                "children": [
                    {
                        "id": "1:3",
                        "name": "Card",
                        "type": "FRAME",
                        "clipsContent": True,
                        "background": [],
                        "layoutMode": "VERTICAL",
                        "itemSpacing": 8.0,
                        "layoutGrids": [
                            {
                                "pattern": "COLUMNS",
                                "sectionSize": 64.0,
                                "visible": True,
                                "color": {"r": 1.0, "g": 0.0, "b": 0.0, "a": 0.1},
                                "alignment": "STRETCH",
                                "gutterSize": 20.0,
                                "offset": 0.0,
                                "count": 4,
                            },
                        ],
                        "exportSettings": [
                            {"suffix": "@2x", "format": "PNG", "constraint": {"type": "SCALE", "value": 2.0}},
                        ],
                        "children": [RECTANGLE_NODE, TEXT_NODE, INSTANCE_NODE],
                    },
                    SECTION_NODE,
                ],
            },
        ],
    },
    "components": {
        "2:1": {
            "key": "c0ffee",
            "name": "Button",
            "description": "Primary action",
            "componentSetId": "2:0",
            "documentationLinks": [],
            "remote": False,
        },
    },
    "componentSets": {
        "2:0": {"key": "5e7", "name": "Button", "description": "", "remote": False},
    },
    "schemaVersion": 0,
    "styles": {
        "3:1": {"key": "f111", "name": "Brand/Primary", "styleType": "FILL", "description": "", "remote": False},
    },
}


FILE_NODES_RESPONSE = {
    "name": "Design System",
    "lastModified": "2024-03-01T10:00:00Z",
    "thumbnailUrl": "https://s3-alpha.figma.com/thumbnails/abc",
    "version": "5002",
    "nodes": {
        "1:4": {
            "document": TEXT_NODE,
            "components": {},
            "schemaVersion": 0,
            "styles": {},
        },
        "9:9": None,
    },
}


COMMENT = {
    "id": "100",
    "file_key": "ABC123",
    "parent_id": "",
    "user": USER,
    "created_at": "2024-03-02T09:30:00Z",
    "resolved_at": None,
    "message": "Looks good",
    "client_meta": {"node_id": "1:3", "node_offset": {"x": 10.0, "y": 20.0}},
    "order_id": "1",
    "reactions": [],
}


COMPONENT_METADATA = {
    "key": "c0ffee",
    "file_key": "ABC123",
    "node_id": "2:1",
    "thumbnail_url": "https://s3-alpha.figma.com/thumbnails/c0ffee",
    "name": "Button",
    "description": "Primary action",
    "created_at": "2024-01-01T00:00:00Z",
    "updated_at": "2024-02-01T00:00:00Z",
    "user": USER,
    "containing_frame": {
        "nodeId": "2:0",
        "name": "Buttons",
        "backgroundColor": "#FFFFFF",
        "pageId": "0:1",
        "pageName": "Page 1",
        "containingStateGroup": {"name": "Button", "nodeId": "2:0"},
    },
}


STYLE_METADATA = {
    "key": "f111",
    "file_key": "ABC123",
    "node_id": "3:1",
    "style_type": "FILL",
    "thumbnail_url": "https://s3-alpha.figma.com/thumbnails/f111",
    "name": "Brand/Primary",
    "description": "",
    "created_at": "2024-01-01T00:00:00Z",
    "updated_at": "2024-02-01T00:00:00Z",
    "user": USER,
    "sort_position": "a",
}


@pytest.fixture
def file_payload():
    return copy.deepcopy(FILE_RESPONSE)


@pytest.fixture
def file_nodes_payload():
    return copy.deepcopy(FILE_NODES_RESPONSE)


@pytest.fixture
def comment_payload():
    return copy.deepcopy(COMMENT)
