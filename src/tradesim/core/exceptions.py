"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    status_code = 400

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class AuthenticationError(AppError):
    """Raised on bad credentials or a missing/expired session."""

    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, code="AUTHENTICATION_ERROR")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    status_code = 404

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class TradeError(AppError):
    """Base class for order settlement failures (recorded as FAILED transactions)."""


class InsufficientFundsError(TradeError):
    """Raised when a BUY costs more than the wallet balance."""

    def __init__(self, requested: str, available: str):
        super().__init__(
            f"Insufficient wallet balance: requested {requested}, available {available}",
            code="INSUFFICIENT_FUNDS",
        )


class InsufficientSharesError(TradeError):
    """Raised when attempting to sell more shares than owned."""

    def __init__(self, symbol: str, requested: str, available: str):
        super().__init__(
            f"Insufficient shares of {symbol}: requested {requested}, available {available}",
            code="INSUFFICIENT_SHARES",
        )


class InvalidTradeTypeError(TradeError):
    """Raised when the order side is neither BUY nor SELL."""

    def __init__(self, trade_type: str):
        super().__init__(f"Invalid trade type: {trade_type}", code="INVALID_TRADE_TYPE")


class StorageError(AppError):
    """Raised when persistence fails unexpectedly."""

    status_code = 500

    def __init__(self, message: str = "Storage failure"):
        super().__init__(message, code="STORAGE_ERROR")
