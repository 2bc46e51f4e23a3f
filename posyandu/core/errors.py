class ValidationError(ValueError):
    """Raised when a measurement or subject field cannot be classified."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")
