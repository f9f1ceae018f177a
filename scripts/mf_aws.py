#!/usr/bin/env python3
"""
mf-aws from a source checkout.

Prints shell statements exporting MFA-backed temporary credentials:

    eval "$(python3 scripts/mf_aws.py dev)"
"""

import sys
from pathlib import Path

# Add the parent directory to sys.path to import from mfaws
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
from mfaws.cli import main

if __name__ == "__main__":
    main()
