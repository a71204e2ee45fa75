"""SDK-specific error classes."""


class OpenSeaSDKError(Exception):
    """Base exception for all SDK errors."""
    pass


class ConfigurationError(OpenSeaSDKError):
    """Exception raised for invalid API or network configuration."""
    pass


class SchemaValidationError(OpenSeaSDKError):
    """Exception raised when a payload does not match its data contract."""
    pass


class OrderSerializationError(SchemaValidationError):
    """Exception raised when an order cannot be converted to or from JSON."""
    pass


class InvalidBundleError(SchemaValidationError):
    """Exception raised when bundle assets and schemas do not pair up."""
    pass


class InvalidFeeError(OpenSeaSDKError):
    """Exception raised for out-of-range or inconsistent fee values."""
    pass


class InvalidCallbackResultError(OpenSeaSDKError):
    """Exception raised when a callback receives both or neither of error and result."""
    pass
