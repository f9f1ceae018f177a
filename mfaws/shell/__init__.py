"""
Rendering of credentials as shell statements.
"""

from .renderer import (
    STALE_VARIABLES,
    render_unset,
    render_export,
    render_credentials,
    write_credentials,
)
