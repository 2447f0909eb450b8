from typing import Annotated, Optional, Union

import pytest
from pydantic import BaseModel, ConfigDict, Field

from validated_actions import SchemaDefinitionError
from validated_actions.schema import PydanticSchema, Schema, ValidationIssue, ValidationResult, as_schema


class User(BaseModel):
    id: int
    email: str
    nickname: Optional[str] = None
    bio: Union[str, None]
    score: Annotated[Optional[float], Field(description="Ranking score")] = None
    tags: list = []


def test_optional_fields_metadata():
    schema = PydanticSchema(User)

    assert schema.optional_fields() == frozenset({"nickname", "bio", "score", "tags"})
    assert schema.is_object is True


def test_safe_validate_success_returns_model():
    result = PydanticSchema(User).safe_validate({"id": "5", "email": "a@b.c", "bio": None})

    assert result.success is True
    assert isinstance(result.data, User)
    assert result.data.id == 5


def test_safe_validate_failure_collects_ordered_issues():
    result = PydanticSchema(User).safe_validate({"id": "x"})

    assert result.success is False
    assert [i.path for i in result.issues] == [("id",), ("email",), ("bio",)]
    assert result.issues[1] == ValidationIssue(message="Field required", path=("email",), code="missing")


def test_strip_mode_drops_undeclared_keys_only_at_top_level():
    class Open(BaseModel):
        model_config = ConfigDict(extra="allow")

        id: int
        meta: dict = {}

    schema = PydanticSchema(Open)

    loose = schema.safe_validate({"id": 1, "other": 2, "meta": {"x": 1}})
    strict = schema.safe_validate({"id": 1, "other": 2, "meta": {"x": 1}}, strip=True)

    assert loose.data.model_extra == {"other": 2}
    assert strict.data.model_extra == {}
    assert strict.data.meta == {"x": 1}


def test_strip_mode_keeps_aliases():
    class Aliased(BaseModel):
        user_id: int = Field(alias="userId")

    result = PydanticSchema(Aliased).safe_validate({"userId": 3, "junk": 1}, strip=True)

    assert result.data.user_id == 3


def test_validation_result_constructors():
    assert ValidationResult.ok(1) == ValidationResult(success=True, data=1)
    failed = ValidationResult.fail([ValidationIssue(message="m")])
    assert failed.success is False
    assert failed.issues == (ValidationIssue(message="m", path=(), code="invalid"),)


def test_as_schema_accepts_models_types_and_schemas():
    schema = PydanticSchema(User)

    assert as_schema(schema) is schema
    assert isinstance(as_schema(User), PydanticSchema)
    assert as_schema(int).safe_validate("3").data == 3
    assert isinstance(as_schema(User), Schema)


def test_as_schema_accepts_custom_schema_objects():
    class Always:
        model = None

        def safe_validate(self, value, *, strip=False):
            return ValidationResult.ok(value)

        def optional_fields(self):
            return frozenset()

    custom = Always()

    assert as_schema(custom) is custom


def test_as_schema_rejects_model_instances():
    with pytest.raises(SchemaDefinitionError):
        as_schema(User(id=1, email="a@b.c", bio=None))


def test_as_schema_rejects_unsupported_objects():
    class NotPydantic:
        pass

    with pytest.raises(SchemaDefinitionError):
        as_schema(NotPydantic)
