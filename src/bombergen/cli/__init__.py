"""bombergen CLI module.

Provides the `bombergen` command for printing and validating blueprints.

Usage:
    bombergen story 23

Or directly:
    python -m bombergen.cli.app story 23
"""

from bombergen.cli.app import main

__all__ = ["main"]
