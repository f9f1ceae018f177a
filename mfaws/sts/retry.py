"""
Bounded retry policy.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, TypeVar

__all__ = [
    'MAX_ATTEMPTS',
    'RETRY_DELAY_SECONDS',
    'RetryPolicy',
]

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 2
RETRY_DELAY_SECONDS = 1.0

T = TypeVar("T")

def _always(exc: Exception) -> bool:
    return True

@dataclass(frozen=True)
class RetryPolicy:
    """
    Retry an operation a fixed number of times with a fixed delay.
    
    Attributes:
        max_attempts: Total attempts, including the first
        delay: Seconds to wait between attempts
        retryable: Decides whether an error is worth another attempt
        sleep: Blocking wait, replaceable in tests
    """
    max_attempts: int = MAX_ATTEMPTS
    delay: float = RETRY_DELAY_SECONDS
    retryable: Callable[[Exception], bool] = _always
    sleep: Callable[[float], None] = field(default=time.sleep, compare=False)
    
    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {self.max_attempts}")
        if self.delay < 0:
            raise ValueError(f"delay must not be negative, got {self.delay}")
    
    def call(self, operation: Callable[[int], T]) -> T:
        """
        Run an operation until it succeeds or the attempts run out.
        
        Args:
            operation: Called with the 1-based attempt number
            
        Returns:
            The operation's result from the first successful attempt
        """
        attempt = 0
        while True:
            attempt += 1
            try:
                return operation(attempt)
            except Exception as e:
                if attempt >= self.max_attempts or not self.retryable(e):
                    raise
                logger.warning("Attempt %d/%d failed: %s; retrying in %.1fs",
                               attempt, self.max_attempts, e, self.delay)
                self.sleep(self.delay)
