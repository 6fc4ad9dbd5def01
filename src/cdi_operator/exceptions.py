"""Exceptions raised by the CDI operator tooling."""


class ValidationFailedError(ValueError):
    """Factory arguments were rejected by the validation layer."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Validation failed: {'; '.join(errors)}")
