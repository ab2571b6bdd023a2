"""
Error taxonomy shared by the contract accessor and the request handler.
"""


class LandApiError(Exception):
    """Base class for errors the request handler knows how to report."""

    code = "INTERNAL_ERROR"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(LandApiError):
    """Required configuration is missing or invalid."""

    code = "CONFIGURATION_ERROR"


class ContractConnectionError(LandApiError, ConnectionError):
    """The RPC endpoint could not be reached."""

    code = "CONNECTION_ERROR"
    status_code = 502


class NotInitializedError(LandApiError):
    """The accessor holds no live handle."""

    code = "NOT_INITIALIZED"


class ValidationError(LandApiError):
    """Caller input is malformed. Never retried."""

    code = "VALIDATION_ERROR"
    status_code = 400


class OperationError(LandApiError):
    """The contract call itself failed (revert, permission, not found...)."""

    code = "OPERATION_ERROR"
    status_code = 502
