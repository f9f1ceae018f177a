from base64 import b32encode
from datetime import datetime
from typing import Union

import pyotp

CODE_DIGITS = 6
CODE_INTERVAL = 30

def generate_code(secret: bytes, at: Union[datetime, float, int]) -> str:
    """
    Derive the TOTP code for a raw shared secret at a point in time.
    
    Codes are 6 digits over a 30 second window using HMAC-SHA1, whatever
    parameters the provisioning URI carried.
    
    Args:
        secret: Raw shared secret bytes
        at: Timestamp (datetime or Unix seconds)
        
    Returns:
        str: Zero-padded code
    """
    if not secret:
        raise ValueError("cannot derive a TOTP code from an empty secret")
    if not isinstance(at, datetime):
        at = int(at)
    totp = pyotp.TOTP(b32encode(secret).decode("ascii"), digits=CODE_DIGITS, interval=CODE_INTERVAL)
    return totp.at(at)
