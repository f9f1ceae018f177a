"""
mf-aws command line

Usage:
    eval "$(mf-aws PROFILE)"
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .engine import MfaEngine
from .errors import MfAwsError, format_error_chain

LOG_LEVEL_VARIABLE = "MF_AWS_LOG_LEVEL"

def configure_logging(environ=None):
    """Send log records to stderr; stdout carries the shell statements."""
    if environ is None:
        environ = os.environ
    level_name = environ.get(LOG_LEVEL_VARIABLE, "WARNING").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mf-aws",
        description="Issue MFA-backed temporary AWS credentials as shell export statements",
    )
    parser.add_argument("profile", help="AWS profile (and section in ~/.aws/mf-aws.ini) to use")
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()
    
    try:
        MfaEngine(args.profile).execute()
    except MfAwsError as e:
        print(f"Error: {format_error_chain(e)}", file=sys.stderr)
        sys.exit(1)
    
    return 0

if __name__ == "__main__":
    main()
