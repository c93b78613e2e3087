"""
Validation package for solved floor plans.

Public API:
    - ValidationResult, ValidationIssue, Severity: Core result types
    - ValidationError: Exception raised on FAIL issues
    - check_floor_plan(): Run all floor plan checks
"""

from .core import (
    Severity,
    ValidationIssue,
    ValidationResult,
    ValidationError,
)
from .plan_checks import check_floor_plan, check_unplaced_rooms, check_descriptions

__all__ = [
    # Core types
    'Severity',
    'ValidationIssue',
    'ValidationResult',
    'ValidationError',
    # Checks
    'check_floor_plan',
    'check_unplaced_rooms',
    'check_descriptions',
]
