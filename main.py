#!/usr/bin/env python3
"""
Minefield - Main entry point.

Usage:
    python main.py play [--difficulty {beginner,intermediate,expert,custom}]
    python main.py simulate [--games N]
"""
import sys

from minefield.cli import main


if __name__ == "__main__":
    sys.exit(main())
