class AnalysisError(Exception):
    """Raised when a comment analysis request fails."""


class AnalysisValidationError(AnalysisError):
    """Raised when the service response does not have the expected shape."""


class AnalysisNetworkError(AnalysisError):
    """Raised when the Perspective call fails due to network/service issues."""


class InvalidModelError(ValueError):
    """Raised when a value outside the model catalog is used as a model."""
