#!/usr/bin/env python3
"""
run.py - Main entry point for Connect N

Examples:

    # Play, choosing the game type from the menu
    python run.py play

    # Play a specific game type, or a custom board
    python run.py play --preset tiny
    python run.py play --width 8 --height 8 --win-length 5

    # List the game types
    python run.py presets

    # Analyze a 5x5 position
    python run.py test --preset tiny --position 0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,1,1,1,2,2

    # Benchmark the regular board with 5000 iterations
    python run.py benchmark --iterations 5000 --debug-level info
"""

import os
import sys

# Add the project root to Python path to ensure imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from connectn.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
