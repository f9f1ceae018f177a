"""
mfaws: MFA-backed temporary AWS credentials for the shell.
"""

from .engine import MfaEngine
from .errors import (
    MfAwsError,
    ConfigError,
    AuthenticationError,
    ExchangeError,
    OutputError,
)

__version__ = "0.1.0"
