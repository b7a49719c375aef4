class SchedulingError(ValueError):
    """Raised when generator input would produce a corrupt calendar."""


class ConfigError(SchedulingError):
    """Raised when a competition configuration cannot be loaded or is invalid."""

    def __init__(self, message, errors=None):
        super().__init__(message)
        self.errors = list(errors) if errors else []
