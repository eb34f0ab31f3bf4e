"""
Custom exception classes for the application.
"""

class BaseCustomException(Exception):
    """Base class for custom exceptions in this application."""
    pass

class UnsupportedConversion(BaseCustomException, ValueError):
    """Raised when no conversion route exists between two coordinate systems."""

    def __init__(self, from_sys, to_sys):
        self.from_sys = from_sys
        self.to_sys = to_sys
        super().__init__(f'不支持的坐标转换: {from_sys} -> {to_sys}')

class InvalidCoordinateError(BaseCustomException, ValueError):
    """Raised when user-entered coordinates cannot be parsed or are out of range."""
    pass

class UnknownProviderError(BaseCustomException):
    """Raised when a map provider name is not recognised."""

    def __init__(self, provider):
        self.provider = provider
        super().__init__(f'未知的地图服务商: {provider}')
