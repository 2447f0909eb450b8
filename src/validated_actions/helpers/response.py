from __future__ import annotations

from typing import Iterable, List, Optional

from validated_actions.config.settings import settings
from validated_actions.contracts.error_codes import ErrorCode
from validated_actions.contracts.response import Message, Response
from validated_actions.schema.types import ValidationIssue

_NO_DETAILS = "Validation failed"


def create_error_response(code: str, message: str) -> Response:
    """
    Standard single-message failure record.
    """
    return Response(success=False, messages=[Message(code=str(getattr(code, "value", code)), text=message)])


def format_issue(issue: ValidationIssue, *, separator: Optional[str] = None) -> str:
    """
    "<message> (at <dotted path>)", or just the message for a root-level issue.
    """
    if not issue.path:
        return issue.message
    sep = settings.issue_path_separator if separator is None else separator
    return f"{issue.message} (at {sep.join(str(p) for p in issue.path)})"


def issues_to_messages(issues: Iterable[ValidationIssue], *, separator: Optional[str] = None) -> List[Message]:
    return [
        Message(code=ErrorCode.VALIDATION_ERROR.value, text=format_issue(i, separator=separator))
        for i in issues
    ]


def validation_error_response(issues: Iterable[ValidationIssue], *, separator: Optional[str] = None) -> Response:
    """
    Failure record for a validation stage. A failure always carries at least one
    message, even when the schema reported no issue details.
    """
    messages = issues_to_messages(issues, separator=separator)
    if not messages:
        messages = issues_to_messages([ValidationIssue(message=_NO_DETAILS)])
    return Response(success=False, messages=messages)
