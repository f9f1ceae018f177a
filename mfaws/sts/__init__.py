"""
STS access: identity verification and MFA session-token exchange.
"""

from .gateway import CallerIdentity, SessionCredentials, StsGateway
from .identity import shared_credentials_session, verify_identity
from .retry import RetryPolicy
from .exchange import DEFAULT_RETRY_POLICY, exchange_session_token
