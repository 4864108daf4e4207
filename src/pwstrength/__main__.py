#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
"""
Allow running pwstrength as a module: python -m pwstrength
"""

from pwstrength.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
