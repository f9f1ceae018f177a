"""
Narrow wrapper around the STS client.

The pipeline only needs two STS operations; wrapping them keeps botocore
response shapes in one place and lets tests substitute a fake gateway.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

__all__ = [
    'CallerIdentity',
    'SessionCredentials',
    'StsGateway',
]

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class CallerIdentity:
    """Identity the long-lived credentials resolve to."""
    arn: str
    account: str
    user_id: str

@dataclass(frozen=True)
class SessionCredentials:
    """Temporary credentials issued by GetSessionToken."""
    access_key_id: str
    secret_access_key: str
    session_token: str
    expiration: datetime
    
    def __repr__(self) -> str:
        return (f"SessionCredentials(access_key_id={self.access_key_id!r}, "
                f"expiration={self.expiration.isoformat()})")

class StsGateway:
    """
    Calls STS on behalf of the pipeline.
    """
    
    def __init__(self, client: Any):
        """
        Initialize the gateway.
        
        Args:
            client: A boto3 STS client
        """
        self.client = client
    
    def get_caller_identity(self) -> CallerIdentity:
        """
        Ask STS which identity the client's credentials belong to.
        
        Returns:
            CallerIdentity: ARN, account and user id of the caller
        """
        logger.debug("Calling sts:GetCallerIdentity")
        response = self.client.get_caller_identity()
        return CallerIdentity(
            arn=response.get("Arn", ""),
            account=response.get("Account", ""),
            user_id=response.get("UserId", ""),
        )
    
    def get_session_token(self, serial_number: str, token_code: str,
                          duration_seconds: Optional[int] = None) -> SessionCredentials:
        """
        Exchange an MFA code for temporary credentials.
        
        Args:
            serial_number: ARN of the MFA device
            token_code: Current code displayed by the device
            duration_seconds: Requested lifetime (default: STS default)
            
        Returns:
            SessionCredentials: The issued credentials
        """
        params: Dict[str, Any] = {
            "SerialNumber": serial_number,
            "TokenCode": token_code,
        }
        if duration_seconds is not None:
            params["DurationSeconds"] = duration_seconds
        
        logger.debug("Calling sts:GetSessionToken for device %s (duration: %s)",
                     serial_number, duration_seconds if duration_seconds is not None else "default")
        response = self.client.get_session_token(**params)
        credentials = response["Credentials"]
        return SessionCredentials(
            access_key_id=credentials["AccessKeyId"],
            secret_access_key=credentials["SecretAccessKey"],
            session_token=credentials["SessionToken"],
            expiration=credentials["Expiration"],
        )
