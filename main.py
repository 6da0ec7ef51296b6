"""
Minesweeper Game - Main Entry Point
Classic minesweeper for the desktop
"""

import sys
import os

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from desktop.cli import main


if __name__ == "__main__":
    main()
