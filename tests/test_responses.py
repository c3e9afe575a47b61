from figma_rest.models import (
    CommentsResponse,
    ComponentResponse,
    FileImageResponse,
    FileNodesResponse,
    FileResponse,
    StyleResponse,
    TextNode,
)

from conftest import COMPONENT_METADATA, STYLE_METADATA


def test_file_response_round_trip(file_payload):
    result = FileResponse.model_validate(file_payload)

    # Fields of unknown node types are not part of the schema
    del file_payload["document"]["children"][0]["children"][1]["sectionContentsHidden"]
    assert result.to_dict() == file_payload


def test_file_response_components_and_styles(file_payload):
    result = FileResponse.model_validate(file_payload)

    assert result.components["2:1"].component_set_id == "2:0"
    assert result.component_sets["2:0"].name == "Button"
    assert result.styles["3:1"].style_type.value == "FILL"


def test_file_nodes_round_trip_keeps_missing_nodes(file_nodes_payload):
    result = FileNodesResponse.model_validate(file_nodes_payload)

    assert isinstance(result.nodes["1:4"].document, TextNode)
    assert result.to_dict() == file_nodes_payload
    assert result.to_dict()["nodes"]["9:9"] is None


def test_image_response_with_null_render_round_trip():
    payload = {"err": None, "images": {"1:2": "https://s3/1-2.png", "3:4": None}}

    result = FileImageResponse.model_validate(payload)

    assert result.images == {"1:2": "https://s3/1-2.png", "3:4": None}
    assert result.to_dict() == payload


def test_image_response_error_body():
    result = FileImageResponse.model_validate({"err": "Render timeout", "status": 400})

    assert result.err == "Render timeout"
    assert result.status == 400
    assert result.images == {}


def test_comments_round_trip(comment_payload):
    payload = {"comments": [comment_payload]}

    assert CommentsResponse.model_validate(payload).to_dict() == payload


def test_library_envelopes_round_trip():
    component = {"status": 200, "error": False, "meta": COMPONENT_METADATA}
    style = {"status": 200, "error": False, "meta": STYLE_METADATA}

    assert ComponentResponse.model_validate(component).to_dict() == component
    assert StyleResponse.model_validate(style).to_dict() == style


def test_unknown_fields_are_ignored():
    result = FileImageResponse.model_validate({"err": None, "images": {}, "renderTime": 12})

    assert result.to_dict() == {"err": None, "images": {}}


def test_unlisted_editor_type_and_role_decode(file_payload):
    file_payload["editorType"] = "slides"
    file_payload["role"] = "commenter"
    file_payload["styles"]["3:1"]["styleType"] = "VARIABLE"

    result = FileResponse.model_validate(file_payload)

    assert result.editor_type == "slides"
    assert result.role == "commenter"
    assert result.styles["3:1"].style_type == "VARIABLE"
    assert result.to_dict()["editorType"] == "slides"
