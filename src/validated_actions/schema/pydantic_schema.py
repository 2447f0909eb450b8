"""
Pydantic binding of the Schema protocol.

Responsibilities:
- Validate arbitrary values through a TypeAdapter (BaseModel subclasses or any type pydantic understands)
- Convert pydantic ValidationError into ordered ValidationIssue tuples
- Expose optional/nullable field metadata for object (BaseModel) schemas
- Implement strip mode: drop top-level keys the model does not declare
"""

from __future__ import annotations

import types
from typing import Any, Annotated, FrozenSet, Mapping, Optional, Set, Tuple, Union, get_args, get_origin

from pydantic import AliasChoices, AliasPath, BaseModel, PydanticUserError, TypeAdapter, ValidationError
from pydantic.fields import FieldInfo

from validated_actions.errors import SchemaDefinitionError
from validated_actions.logging.logger import setup_logger
from validated_actions.schema.types import Schema, ValidationIssue, ValidationResult

logger = setup_logger(__name__)


def _is_model(tp: Any) -> bool:
    return isinstance(tp, type) and issubclass(tp, BaseModel)


def _is_nullable(annotation: Any) -> bool:
    if annotation is None or annotation is type(None):
        return True
    origin = get_origin(annotation)
    if origin is Annotated:
        return _is_nullable(get_args(annotation)[0])
    if origin is Union or origin is types.UnionType:
        return any(_is_nullable(arg) for arg in get_args(annotation))
    return False


def _input_keys(name: str, info: FieldInfo) -> Set[str]:
    """Keys under which a field may appear in raw input (name + string aliases)."""
    keys = {name}
    if isinstance(info.alias, str):
        keys.add(info.alias)
    va = info.validation_alias
    if isinstance(va, str):
        keys.add(va)
    elif isinstance(va, AliasChoices):
        for choice in va.choices:
            if isinstance(choice, str):
                keys.add(choice)
            elif isinstance(choice, AliasPath) and choice.path and isinstance(choice.path[0], str):
                keys.add(choice.path[0])
    elif isinstance(va, AliasPath) and va.path and isinstance(va.path[0], str):
        keys.add(va.path[0])
    return keys


def issues_from_error(err: ValidationError) -> Tuple[ValidationIssue, ...]:
    return tuple(
        ValidationIssue(message=e["msg"], path=tuple(e["loc"]), code=e["type"])
        for e in err.errors()
    )


class PydanticSchema:
    """
    Schema backed by pydantic.

    For BaseModel subclasses the validated value is a model instance; fields that were
    absent from the input are not in instance.model_fields_set.
    """

    def __init__(self, model: Any):
        self.model = model
        self._adapter: TypeAdapter[Any] = TypeAdapter(model)
        self._optional: FrozenSet[str] = frozenset(self._collect_optional())
        self._declared: Optional[FrozenSet[str]] = self._collect_declared()

    def _collect_optional(self) -> Set[str]:
        if not _is_model(self.model):
            return set()
        keys: Set[str] = set()
        for name, info in self.model.model_fields.items():
            if not info.is_required() or _is_nullable(info.annotation):
                keys |= _input_keys(name, info)
        return keys

    def _collect_declared(self) -> Optional[FrozenSet[str]]:
        if not _is_model(self.model):
            return None
        keys: Set[str] = set()
        for name, info in self.model.model_fields.items():
            keys |= _input_keys(name, info)
        return frozenset(keys)

    @property
    def is_object(self) -> bool:
        return _is_model(self.model)

    def optional_fields(self) -> FrozenSet[str]:
        return self._optional

    def strip_unknown(self, value: Any) -> Any:
        if self._declared is None or not isinstance(value, Mapping):
            return value
        return {k: v for k, v in value.items() if k in self._declared}

    def safe_validate(self, value: Any, *, strip: bool = False) -> ValidationResult:
        if strip:
            value = self.strip_unknown(value)
        try:
            validated = self._adapter.validate_python(value)
        except ValidationError as err:
            return ValidationResult.fail(issues_from_error(err))
        return ValidationResult.ok(validated)

    def __repr__(self) -> str:
        return f"PydanticSchema({getattr(self.model, '__name__', self.model)!r})"


def as_schema(obj: Any) -> Schema:
    """
    Accept either a ready Schema or anything pydantic can validate against.

    Raises SchemaDefinitionError for instances (e.g. a model *instance* instead of the class)
    and for types pydantic cannot build a validator for.
    """
    if isinstance(obj, PydanticSchema):
        return obj
    if isinstance(obj, BaseModel):
        raise SchemaDefinitionError(
            f"Expected a schema type, got an instance of {type(obj).__name__}"
        )
    if not isinstance(obj, type) and isinstance(obj, Schema):
        return obj
    try:
        return PydanticSchema(obj)
    except (PydanticUserError, TypeError) as e:
        logger.warning("Schema definition rejected | obj=%r | error=%s", obj, e)
        raise SchemaDefinitionError(f"Cannot build a schema from {obj!r}") from e
