"""
Utility functions shared by the pipeline stages.
"""

from .env import DEFAULT_REGION, snapshot_environment, resolve_region
from .totp import generate_code

__all__ = [
    'DEFAULT_REGION',
    'snapshot_environment',
    'resolve_region',
    'generate_code',
]
