"""
error_formatter.py
==================
Renders collected target validation failures as a single message for
display to the user.
"""

from typing import Sequence

from scopecheck.validators.batch_validators import ValidationFailure


def format_failure(failure: ValidationFailure) -> str:
    """Render one failure as "line <n> '<target>': <message>"."""
    return f"line {failure.line} '{failure.target}': {failure.message}"


def format_validation_errors(failures: Sequence[ValidationFailure]) -> str:
    """
    Format a failure list into a user-facing message.

    - no failures  -> ""
    - one failure  -> the rendered line, without a count
    - two or more  -> a "found N target format errors:" header followed by
                      one rendered line per failure
    """
    if not failures:
        return ""

    if len(failures) == 1:
        return format_failure(failures[0])

    lines = [format_failure(f) for f in failures]
    return f"found {len(failures)} target format errors:\n" + "\n".join(lines)
