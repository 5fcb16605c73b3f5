"""Errors raised by the validation core."""


class ValidationResultNotFoundError(LookupError):
    """No validation result exists for the requested id."""

    def __init__(self, validation_id: str) -> None:
        self.validation_id = validation_id
        if validation_id.strip():
            message = f"Validation result '{validation_id}' not found"
        else:
            message = "Validation ID is required"
        super().__init__(message)
