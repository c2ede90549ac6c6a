"""
batch_validators.py

Validate a multi-line block of scan targets and collect line-addressed
failures in input order.
"""

from dataclasses import asdict, dataclass
from typing import Iterator, List, Tuple

from scopecheck.validators.target_validators import (
    COMMENT_PREFIX,
    validate_single_target,
)


@dataclass(frozen=True)
class ValidationFailure:
    """One invalid target line."""

    line: int
    target: str
    message: str

    def to_dict(self) -> dict:
        return asdict(self)


def iter_target_lines(text: str) -> Iterator[Tuple[int, str]]:
    """
    Yield (line_number, target) for every non-blank, non-comment line.

    Line numbers are 1-based and count every line of the input, including
    the skipped ones.
    """
    for line_number, raw in enumerate(text.split("\n"), 1):
        target = raw.strip()
        if not target or target.startswith(COMMENT_PREFIX):
            continue
        yield line_number, target


def validate_targets(text: str) -> List[ValidationFailure]:
    """
    Validate every target line in text.

    Returns:
        Failures ordered by line number. Repeated identical errors on
        different lines are all kept.
    """
    failures = []
    for line_number, target in iter_target_lines(text):
        message = validate_single_target(target)
        if message:
            failures.append(ValidationFailure(line_number, target, message))
    return failures
