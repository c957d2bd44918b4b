#!/usr/bin/env python3
"""
ReTyper entry point for running as a module: python3 -m retyper
"""

import sys
from retyper.cli import main

if __name__ == '__main__':
    sys.exit(main())
