"""Scan target list validation: IPv4, CIDR, IP range and domain targets."""

from scopecheck.core.error_formatter import format_validation_errors
from scopecheck.core.target_splitter import TargetSplitter
from scopecheck.validators.batch_validators import ValidationFailure, validate_targets
from scopecheck.validators.target_validators import TargetKind, classify_target, validate_single_target

__version__ = "1.0.0"

__all__ = [
    "validate_single_target", "classify_target", "TargetKind",
    "validate_targets", "ValidationFailure",
    "format_validation_errors",
    "TargetSplitter",
]
