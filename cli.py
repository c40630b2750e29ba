#!/usr/bin/env python3
"""voicecmd: speak a request, get one Bash command back.

Usage:
    python cli.py        # records until Enter or Ctrl+C, then prints the command

Needs OPENAI_API_KEY in the environment or a .env file.
"""

import sys
import os

sys.path.insert(0, os.path.dirname(__file__))

from voicecmd.cli_runtime import run_cli


if __name__ == "__main__":
    sys.exit(run_cli())
