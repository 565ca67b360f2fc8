"""Task text parsing helpers.

Structured tasks carry optional labelled fields after a free-text body,
inline or on their own lines:

    @critic def login(): ... Focus: SQL injection

    @education SQLi walkthrough
    Learning Goal: understand UNION attacks
    Audience: beginners

Labels match case-insensitively at the start of the text or after
whitespace, and the value runs until the next label. Text before the first
label is the body.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, Tuple

from agents_hub.errors import TaskValidationError


@dataclass(frozen=True)
class StructuredTask:
    body: str
    fields: Dict[str, str] = field(default_factory=dict)

    def get(self, label: str, default=None):
        return self.fields.get(_normalize(label), default)


def _normalize(label: str) -> str:
    return " ".join(label.lower().split())


def _label_pattern(labels: Iterable[str]) -> "re.Pattern[str]":
    alternatives = "|".join(
        r"[ \t]+".join(re.escape(word) for word in label.split())
        for label in sorted(labels, key=len, reverse=True)
    )
    return re.compile(rf"(?<!\S)({alternatives})[ \t]*:[ \t]*", re.IGNORECASE)


def parse_structured_task(task: str, labels: Iterable[str]) -> StructuredTask:
    """Split ``task`` into a body and labelled fields.

    Raises:
        TaskValidationError: A label appears more than once
    """
    labels = list(labels)
    if not labels:
        return StructuredTask(body=task.strip())

    matches = list(_label_pattern(labels).finditer(task))
    if not matches:
        return StructuredTask(body=task.strip())

    body = task[: matches[0].start()].strip()
    fields: Dict[str, str] = {}
    for index, match in enumerate(matches):
        end = matches[index + 1].start() if index + 1 < len(matches) else len(task)
        key = _normalize(match.group(1))
        if key in fields:
            raise TaskValidationError(f"'{match.group(1)}:' given more than once.", field=key)
        fields[key] = task[match.end(): end].strip()

    return StructuredTask(body=body, fields=fields)


def split_first_token(task: str) -> Tuple[str, str]:
    """Return the first whitespace-delimited token and the trimmed rest."""
    parts = task.strip().split(None, 1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1].strip()


__all__ = ["StructuredTask", "parse_structured_task", "split_first_token"]
