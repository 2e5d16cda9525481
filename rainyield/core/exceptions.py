class SampleValidationError(ValueError):
    """A pending rainfall/yield pair that cannot be added."""

    code = "invalid_sample"
    message = "Invalid sample."

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingFieldError(SampleValidationError):
    code = "missing_field"
    message = "Please fill in both fields."


class NotPositiveNumberError(SampleValidationError):
    code = "not_positive_number"
    message = "Values must be positive numbers."


class CapacityExceededError(SampleValidationError):
    code = "capacity_exceeded"
    message = "You have reached the maximum number of entries."
