#!/usr/bin/env python3
"""
Legacy runner - forwards to the click CLI
"""

import sys
import os

# Add the src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

from sprig.cli.main import cli

if __name__ == "__main__":
    # If no arguments, start the REPL
    if len(sys.argv) == 1:
        sys.argv.append('repl')

    # Support legacy: main.py filename.sp -> main.py ast filename.sp
    if len(sys.argv) == 2 and sys.argv[1].endswith('.sp'):
        sys.argv.insert(1, 'ast')

    cli()
