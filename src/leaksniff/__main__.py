#!/usr/bin/env python3
"""
Allow running leaksniff as a module: python -m leaksniff
"""

from leaksniff.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
