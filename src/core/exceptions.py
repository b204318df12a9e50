"""
Custom exceptions for the S3 Object Gateway.
Provides specific error types for different failure scenarios.
"""


class GatewayException(Exception):
    """Base exception for all application errors."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ValidationException(GatewayException):
    """Raised when the request body does not describe a usable batch."""
    pass


class S3Exception(GatewayException):
    """Raised when S3 operation fails."""
    pass


class ConfigurationException(GatewayException):
    """Raised when required settings are missing at startup."""
    pass
