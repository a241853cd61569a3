"""
Pytest configuration for all tests.

Adds the project root to the Python path so the top-level packages import
without installation.
"""

import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))
