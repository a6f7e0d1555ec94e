import enum


class ApiErrorCode(enum.Enum):
    """Error codes returned in the body of failed API responses."""
    INVALID_REQUEST_PARAM_VALUE = "INVALID_REQUEST_PARAM_VALUE"


class InvalidConfiguration(ValueError):
    """Raised at startup when the service is wired with an unusable time source."""
