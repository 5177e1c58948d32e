"""
Pattern analysis module.

Provides structural validation of Splice pattern files.
"""

from splicedrum.analysis.splice_validator import (
    SpliceValidator,
    ValidationIssue,
    ValidationResult,
)

__all__ = [
    "SpliceValidator",
    "ValidationIssue",
    "ValidationResult",
]
