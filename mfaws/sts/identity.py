"""
Identity verification

Builds a signed session from the profile's long-lived credentials and
checks that it resolves to an identity before any MFA code is spent.
"""

import logging
from typing import Callable, Optional, Tuple

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ..errors import AuthenticationError
from .gateway import CallerIdentity, StsGateway

__all__ = [
    'SessionFactory',
    'shared_credentials_session',
    'verify_identity',
]

logger = logging.getLogger(__name__)

SessionFactory = Callable[[str, str], boto3.session.Session]

def shared_credentials_session(profile: str, region: str) -> boto3.session.Session:
    """
    Create a boto3 session for a named profile.
    
    The profile is selected explicitly, so credentials exported in the
    environment are ignored in favour of the shared credential files.
    
    Args:
        profile: AWS profile name
        region: AWS region for the session
        
    Returns:
        boto3.session.Session: Session bound to the profile's credentials
    """
    session = boto3.session.Session(profile_name=profile, region_name=region)
    if session.get_credentials() is None:
        raise AuthenticationError(f"no credentials found for profile '{profile}'")
    return session

def verify_identity(profile: str, region: str,
                    session_factory: Optional[SessionFactory] = None) -> Tuple[StsGateway, CallerIdentity]:
    """
    Establish an STS gateway for a profile and confirm who it belongs to.
    
    Args:
        profile: AWS profile name
        region: AWS region to call STS in
        session_factory: Builds the session (default: shared_credentials_session)
        
    Returns:
        Tuple[StsGateway, CallerIdentity]: Gateway for the exchange step and
        the verified identity
    """
    if session_factory is None:
        session_factory = shared_credentials_session
    
    try:
        session = session_factory(profile, region)
        client = session.client("sts", region_name=region)
    except AuthenticationError as e:
        raise AuthenticationError("creating aws session") from e
    except (BotoCoreError, ClientError) as e:
        raise AuthenticationError(f"creating aws session (profile: {profile}, region: {region})") from e
    
    gateway = StsGateway(client)
    try:
        identity = gateway.get_caller_identity()
    except (BotoCoreError, ClientError) as e:
        raise AuthenticationError(f"trying to fetch identity (profile: {profile})") from e
    
    logger.info("Verified identity %s (account %s)", identity.arn, identity.account)
    return gateway, identity
