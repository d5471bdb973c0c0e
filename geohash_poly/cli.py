"""
CLI entry point for geohash-poly command.

This provides a user-friendly command-line interface for polygon coverage.
"""
import sys

from geohash_poly.runner import main

# Re-export main for the console_scripts entry point
__all__ = ['main']

if __name__ == '__main__':
    sys.exit(main())
