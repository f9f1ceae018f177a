"""
Environment helpers.

The process environment is read once into a snapshot that is passed
around explicitly instead of consulting ``os.environ`` from deep inside
the pipeline.
"""

import os
from typing import Dict, Mapping, Optional

DEFAULT_REGION = "us-east-1"
REGION_VARIABLES = ("AWS_DEFAULT_REGION", "AWS_REGION")

def snapshot_environment(environ: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """
    Take a copy of the environment.
    
    Args:
        environ: Mapping to copy (default: os.environ)
        
    Returns:
        Dict[str, str]: Independent copy of the variables
    """
    if environ is None:
        environ = os.environ
    return dict(environ)

def resolve_region(environ: Mapping[str, str]) -> str:
    """
    Resolve the AWS region from the environment override chain.
    
    AWS_DEFAULT_REGION wins over AWS_REGION; empty values are skipped.
    
    Args:
        environ: Environment snapshot
        
    Returns:
        str: The region name, DEFAULT_REGION if none is set
    """
    for name in REGION_VARIABLES:
        value = environ.get(name)
        if value:
            return value
    return DEFAULT_REGION
