"""
MFA configuration store access.
"""

from .loader import (
    MFA_CONFIG_PATH,
    MfaBinding,
    get_config_path,
    parse_secret_uri,
    load_binding,
)
