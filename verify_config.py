#!/usr/bin/env python3
"""Verify that jobfit.example.yaml parses and validates against the config schema."""

import sys
from pathlib import Path

from jobfit.config.loader import validate_config_file


def verify_example_config(path: Path = Path("jobfit.example.yaml")) -> bool:
    """Validate the example configuration file."""
    if not path.exists():
        print(f"✗ {path} not found")
        return False
    return validate_config_file(path)


if __name__ == "__main__":
    success = verify_example_config()
    sys.exit(0 if success else 1)
