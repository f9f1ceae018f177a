"""
Shell statement renderer

Turns issued credentials into statements meant for ``eval`` in the
calling shell. Credential variables already present in the environment
are unset first so nothing stale survives alongside the new session.
"""

from typing import List, Mapping, TextIO

from ..errors import OutputError
from ..sts.gateway import SessionCredentials

__all__ = [
    'STALE_VARIABLES',
    'render_unset',
    'render_export',
    'render_credentials',
    'write_credentials',
]

# Declared order is the order names appear in the unset statement
STALE_VARIABLES = (
    "AWS_ACCESS_KEY_ID",
    "AWS_PROFILE",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_SESSION_TOKEN",
    "AWS_TOKEN_EXPIRATION",
)

def _quote(value: str) -> str:
    return "'" + value.replace("'", "'\"'\"'") + "'"

def render_unset(environ: Mapping[str, str]) -> str:
    """
    Render the statement removing stale credential variables.
    
    Args:
        environ: Environment snapshot
        
    Returns:
        str: ``unset ...`` line, or an empty string when nothing is set
    """
    present = [name for name in STALE_VARIABLES if name in environ]
    if not present:
        return ""
    return f"unset {' '.join(present)}\n"

def render_export(credentials: SessionCredentials) -> str:
    """
    Render the statement exporting the new credentials.
    
    Args:
        credentials: Issued session credentials
        
    Returns:
        str: ``export ...`` line
    """
    assignments: List[str] = [
        f"AWS_ACCESS_KEY_ID={_quote(credentials.access_key_id)}",
        f"AWS_SECRET_ACCESS_KEY={_quote(credentials.secret_access_key)}",
        f"AWS_SESSION_TOKEN={_quote(credentials.session_token)}",
        f"AWS_TOKEN_EXPIRATION={int(credentials.expiration.timestamp())}",
    ]
    return f"export {' '.join(assignments)}\n"

def render_credentials(credentials: SessionCredentials, environ: Mapping[str, str]) -> str:
    """Render the full output: the unset line, if any, then the export line."""
    return render_unset(environ) + render_export(credentials)

def write_credentials(credentials: SessionCredentials, environ: Mapping[str, str], output: TextIO) -> None:
    """
    Write the rendered statements to a stream in a single write.
    
    Args:
        credentials: Issued session credentials
        environ: Environment snapshot
        output: Destination stream
    """
    text = render_credentials(credentials, environ)
    try:
        output.write(text)
        output.flush()
    except (OSError, ValueError) as e:
        raise OutputError("writing statements for credentials") from e
