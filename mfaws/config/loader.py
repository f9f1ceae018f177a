"""
MFA configuration loader

Reads the per-profile MFA binding from ``~/.aws/mf-aws.ini``. Each section
is named after an AWS profile and carries the MFA device ARN and the TOTP
provisioning URI for that device:

    [dev]
    mfa-arn = arn:aws:iam::123456789012:mfa/alice
    mfa-key = otpauth://totp/AWS:alice?secret=JBSWY3DPEHPK3PXP

Keys placed in ``[DEFAULT]`` are inherited by every profile.
"""

import configparser
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pyotp

from ..errors import ConfigError

__all__ = [
    'MFA_CONFIG_PATH',
    'REQUIRED_KEYS',
    'MfaBinding',
    'get_config_path',
    'parse_secret_uri',
    'load_binding',
]

logger = logging.getLogger(__name__)

MFA_CONFIG_PATH = "~/.aws/mf-aws.ini"
ARN_KEY = "mfa-arn"
SECRET_KEY = "mfa-key"
DURATION_KEY = "duration-seconds"
# GetSessionToken accepts 15 minutes to 36 hours
MIN_DURATION_SECONDS = 900
MAX_DURATION_SECONDS = 129600
REQUIRED_KEYS = (ARN_KEY, SECRET_KEY)

@dataclass(frozen=True)
class MfaBinding:
    """An MFA device and the shared secret used to derive its codes."""
    token_arn: str
    secret: bytes
    duration_seconds: Optional[int] = None

def get_config_path(path: str = MFA_CONFIG_PATH) -> Path:
    """
    Resolve the configuration path against the user's home directory.
    
    Args:
        path: Home-relative path (default: MFA_CONFIG_PATH)
        
    Returns:
        Path: Absolute path of the configuration file
    """
    try:
        resolved = Path(path).expanduser()
    except RuntimeError as e:
        raise ConfigError(f"looking up home at {path}") from e
    if str(resolved).startswith("~"):
        raise ConfigError(f"looking up home at {path}: home directory could not be determined")
    return resolved

def _read_config(config_path: Path) -> configparser.ConfigParser:
    # otpauth labels are percent-encoded, so interpolation must stay off
    config = configparser.ConfigParser(interpolation=None)
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config.read_file(f, source=str(config_path))
    except (OSError, UnicodeDecodeError, configparser.Error) as e:
        raise ConfigError(f"parsing ini file at {config_path}") from e
    return config

def parse_secret_uri(uri: str) -> bytes:
    """
    Extract the raw shared secret from a TOTP provisioning URI.
    
    Args:
        uri: otpauth://totp/... URI carrying a base32 ``secret`` parameter
        
    Returns:
        bytes: The decoded secret
    """
    try:
        otp = pyotp.parse_uri(uri)
        if not isinstance(otp, pyotp.TOTP):
            raise ValueError(f"expected a totp URI, got {type(otp).__name__.lower()}")
        secret = otp.byte_secret()
    except ValueError as e:
        raise ConfigError("parsing otpauth url") from e
    if not secret:
        raise ConfigError("parsing otpauth url: empty secret")
    return secret

def _parse_duration(value: Optional[str], config_path: Path, profile: str) -> Optional[int]:
    if value is None or not value.strip():
        return None
    try:
        duration = int(value)
    except ValueError as e:
        raise ConfigError(
            f"invalid '{DURATION_KEY}' in config file '{config_path}' for profile '{profile}'"
        ) from e
    if not MIN_DURATION_SECONDS <= duration <= MAX_DURATION_SECONDS:
        raise ConfigError(
            f"invalid '{DURATION_KEY}' in config file '{config_path}' for profile '{profile}': "
            f"must be between {MIN_DURATION_SECONDS} and {MAX_DURATION_SECONDS}, got {duration}"
        )
    return duration

def load_binding(profile: str, config_path: Optional[Path] = None) -> MfaBinding:
    """
    Load and validate the MFA binding for a profile.
    
    Args:
        profile: Section name to read
        config_path: Configuration file (default: resolved MFA_CONFIG_PATH)
        
    Returns:
        MfaBinding: The validated binding
    """
    if not profile:
        raise ConfigError("profile name must not be empty")
    if config_path is None:
        config_path = get_config_path()
    
    logger.debug("Reading MFA configuration for profile %s from %s", profile, config_path)
    config = _read_config(config_path)
    
    if not config.has_section(profile):
        raise ConfigError(f"looking up section '{profile}' at {config_path}: no such section")
    section = config[profile]
    
    for key in REQUIRED_KEYS:
        value = section.get(key)
        if value is None or not value.strip():
            raise ConfigError(
                f"missing key '{key}' in config file '{config_path}' for profile '{profile}'"
            )
    
    try:
        secret = parse_secret_uri(section[SECRET_KEY].strip())
    except ConfigError as e:
        raise ConfigError(
            f"invalid '{SECRET_KEY}' in config file '{config_path}' for profile '{profile}'"
        ) from e
    
    return MfaBinding(
        token_arn=section[ARN_KEY].strip(),
        secret=secret,
        duration_seconds=_parse_duration(section.get(DURATION_KEY), config_path, profile),
    )
