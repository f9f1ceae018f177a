"""
Error types raised by the credential-issuance pipeline.

Each stage raises its own category. Context is attached by raising a new
error of the same category with ``raise ... from err``, so the full chain
of operations stays available for diagnosis.
"""

from typing import List

__all__ = [
    'MfAwsError',
    'ConfigError',
    'AuthenticationError',
    'ExchangeError',
    'OutputError',
    'format_error_chain',
]

class MfAwsError(Exception):
    """Base class for every error raised by mfaws."""

class ConfigError(MfAwsError):
    """The MFA configuration store could not be read or is invalid."""

class AuthenticationError(MfAwsError):
    """Long-lived credentials could not be used to establish an identity."""

class ExchangeError(MfAwsError):
    """The session-token exchange failed after all attempts."""

class OutputError(MfAwsError):
    """Rendered shell statements could not be written."""

def format_error_chain(exc: BaseException) -> str:
    """
    Render an exception followed by every exception it was raised from.
    
    Args:
        exc: The outermost exception
        
    Returns:
        str: Messages joined by ": ", outermost first
    """
    messages: List[str] = []
    current = exc
    while current is not None:
        message = str(current) or type(current).__name__
        messages.append(message)
        current = current.__cause__
    return ": ".join(messages)
