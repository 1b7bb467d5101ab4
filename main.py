#!/usr/bin/env python3
"""
File Name Transformation Tool - Main Entry

Usage:
    python main.py reverse report.txt
    python main.py swap "A - B.txt" --separator -
    python main.py replace foo_bar.txt --old _ --new -
    python main.py case REPORT.TXT --mode lower
    python main.py size ./file.bin
"""

import sys
from pathlib import Path

# Ensure the current directory is in the Python path
sys.path.insert(0, str(Path(__file__).parent))


def main():
    """Main entry point"""
    from cli import main as cli_main
    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
