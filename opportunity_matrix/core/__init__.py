"""
Core Package - AI Opportunities Prioritization Matrix
opportunity_matrix/core/__init__.py

Core infrastructure: exceptions, logging. Session wiring lives in
opportunity_matrix.core.dependencies.
"""

from opportunity_matrix.core.exceptions import (
    DraftValidationException,
    DuplicateEntityException,
    EntityNotFoundException,
    FormStateException,
    OpportunityMatrixException,
    UnknownFieldException,
)
from opportunity_matrix.core.logging import configure_logging

__all__ = [
    # Exceptions
    "DraftValidationException",
    "DuplicateEntityException",
    "EntityNotFoundException",
    "FormStateException",
    "OpportunityMatrixException",
    "UnknownFieldException",
    # Logging
    "configure_logging",
]
