"""
Pytest configuration for smart home tests.

This conftest.py adds the repository root to sys.path so that the
package imports without being installed.
"""

import sys
from pathlib import Path


# Add the repository root to sys.path for proper imports
repo_root = Path(__file__).parent.parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))
