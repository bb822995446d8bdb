"""
Test package for LexiApp.

Adds the repository root to sys.path so the tests run without installing.
"""

import sys
import os

parent_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if parent_dir not in sys.path:
    sys.path.insert(0, parent_dir)
