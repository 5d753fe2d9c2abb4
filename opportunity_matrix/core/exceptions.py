"""
Custom Exceptions - AI Opportunities Prioritization Matrix
opportunity_matrix/core/exceptions.py

Exception classes for store and form operations.
"""


class OpportunityMatrixException(Exception):
    """Base exception for matrix operations."""

    pass


class EntityNotFoundException(OpportunityMatrixException):
    """Entity not found in the store."""

    def __init__(self, entity_type: str, entity_id):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with ID {entity_id} not found")


class DuplicateEntityException(OpportunityMatrixException):
    """Duplicate identifier."""

    def __init__(self, message: str = "Entity already exists"):
        self.message = message
        super().__init__(message)


class FormStateException(OpportunityMatrixException):
    """Form operation not allowed in the current form state."""

    def __init__(self, message: str = "Form is not open"):
        self.message = message
        super().__init__(message)


class UnknownFieldException(OpportunityMatrixException):
    """Draft has no field with this name."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Unknown draft field '{field}'")


class DraftValidationException(OpportunityMatrixException):
    """Draft failed field-level validation and was not submitted."""

    def __init__(self, errors):
        self.errors = list(errors)
        fields = ", ".join(e.field for e in self.errors)
        super().__init__(f"Draft has invalid fields: {fields}")
