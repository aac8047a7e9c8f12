#!/usr/bin/env python3
"""
Legacy runner - delegates to the click CLI
"""

import sys
import os

# Add the src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

from scryptlang.cli.main import cli

if __name__ == "__main__":
    # No arguments: read a program from stdin, like the classic front end
    if len(sys.argv) == 1:
        sys.argv.append('run')

    # Support legacy: main.py program.scrypt -> scrypt run program.scrypt
    if len(sys.argv) == 2 and sys.argv[1].endswith('.scrypt'):
        sys.argv.insert(1, 'run')

    cli()
