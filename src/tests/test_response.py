import pytest
from pydantic import BaseModel, ValidationError

from validated_actions import ErrorCode, Message, Response, create_error_response, create_response_schema
from validated_actions.helpers.response import format_issue, issues_to_messages, validation_error_response
from validated_actions.schema import ValidationIssue


class Item(BaseModel):
    id: int


def test_format_issue_with_and_without_path():
    assert format_issue(ValidationIssue(message="Bad", path=("a", 0, "b"))) == "Bad (at a.0.b)"
    assert format_issue(ValidationIssue(message="Bad")) == "Bad"
    assert format_issue(ValidationIssue(message="Bad", path=("a", "b")), separator="/") == "Bad (at a/b)"


def test_issues_to_messages_uses_validation_error_code():
    messages = issues_to_messages([ValidationIssue(message="One", path=("x",)), ValidationIssue(message="Two")])

    assert messages == [
        Message(code="VALIDATION_ERROR", text="One (at x)"),
        Message(code="VALIDATION_ERROR", text="Two"),
    ]


def test_create_error_response():
    response = create_error_response(ErrorCode.UNAUTHORIZED, "Token expired")

    assert response.success is False
    assert response.data is None
    assert response.messages == [Message(code="UNAUTHORIZED", text="Token expired")]
    assert create_error_response("CUSTOM", "x").messages[0].code == "CUSTOM"


def test_to_payload_omits_absent_fields():
    assert Response(success=False, messages=[Message(code="A", text="b")]).to_payload() == {
        "success": False,
        "messages": [{"code": "A", "text": "b"}],
    }


def test_create_response_schema_validates_data():
    ItemResponse = create_response_schema(Item)

    ok = ItemResponse.model_validate({"success": True, "data": {"id": "3"}})
    assert ok.data == Item(id=3)

    with pytest.raises(ValidationError):
        ItemResponse.model_validate({"success": True, "data": {"id": "x"}})

    with pytest.raises(ValidationError):
        ItemResponse.model_validate({"success": True, "messages": [{"code": "A"}]})


def test_validation_error_response_never_has_empty_messages():
    response = validation_error_response([])

    assert response.success is False
    assert response.messages == [Message(code="VALIDATION_ERROR", text="Validation failed")]
