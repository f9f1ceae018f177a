"""
Session-token exchange

Derives a fresh TOTP code for every attempt and trades it for temporary
credentials. A code rejected because it sat on a window boundary is
retried once with a newly generated code.
"""

import logging
import time
from typing import Callable, Optional

from botocore.exceptions import BotoCoreError, ClientError

from ..config.loader import MfaBinding
from ..errors import ExchangeError
from ..utils.totp import generate_code
from .gateway import SessionCredentials, StsGateway
from .retry import RetryPolicy

__all__ = [
    'DEFAULT_RETRY_POLICY',
    'exchange_session_token',
]

logger = logging.getLogger(__name__)

def _is_transient(exc: Exception) -> bool:
    return isinstance(exc, ExchangeError)

DEFAULT_RETRY_POLICY = RetryPolicy(retryable=_is_transient)

def exchange_session_token(gateway: StsGateway, binding: MfaBinding,
                           policy: Optional[RetryPolicy] = None,
                           clock: Callable[[], float] = time.time) -> SessionCredentials:
    """
    Obtain temporary credentials for an MFA binding.
    
    Args:
        gateway: Verified STS gateway
        binding: MFA device and shared secret
        policy: Retry policy (default: 2 attempts, 1 second apart)
        clock: Returns the current Unix time
        
    Returns:
        SessionCredentials: Credentials from the first accepted code
    """
    if policy is None:
        policy = DEFAULT_RETRY_POLICY
    
    def attempt(number: int) -> SessionCredentials:
        try:
            code = generate_code(binding.secret, clock())
        except ValueError as e:
            raise ExchangeError("generating totp code") from e
        
        try:
            credentials = gateway.get_session_token(
                binding.token_arn, code, duration_seconds=binding.duration_seconds
            )
        except (BotoCoreError, ClientError) as e:
            raise ExchangeError(f"obtaining session token (device: {binding.token_arn}, attempt {number})") from e
        
        logger.info("Session token issued on attempt %d, expires %s",
                    number, credentials.expiration.isoformat())
        return credentials
    
    return policy.call(attempt)
