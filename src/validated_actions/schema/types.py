from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, FrozenSet, Iterable, Protocol, Tuple, Union, runtime_checkable

PathItem = Union[str, int]


@dataclass(frozen=True)
class ValidationIssue:
    """One schema failure: what went wrong and where (path into nested data)."""

    message: str
    path: Tuple[PathItem, ...] = ()
    code: str = "invalid"


@dataclass(frozen=True)
class ValidationResult:
    """
    Result envelope of a schema validation.

    - success=True: data holds the validated/coerced value
    - success=False: issues holds every failure, in the order the engine reported them
    """

    success: bool
    data: Any = None
    issues: Tuple[ValidationIssue, ...] = field(default_factory=tuple)

    @classmethod
    def ok(cls, value: Any) -> "ValidationResult":
        return cls(success=True, data=value)

    @classmethod
    def fail(cls, issues: Iterable[ValidationIssue]) -> "ValidationResult":
        return cls(success=False, issues=tuple(issues))


@runtime_checkable
class Schema(Protocol):
    """
    What the wrappers need from a schema engine.

    - safe_validate: never raises on bad input; strip=True drops undeclared top-level keys
    - optional_fields: input keys declared optional or nullable (object schemas only)
    - model: the engine-native type, re-exposed to tool callers as "parameters"
    """

    model: Any

    def safe_validate(self, value: Any, *, strip: bool = False) -> ValidationResult: ...

    def optional_fields(self) -> FrozenSet[str]: ...
