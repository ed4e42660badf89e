"""
Pytest configuration.
Puts the project root and this directory on sys.path so tests can import
main, domain, services, ... and the shared test_fixtures module.
"""

import os
import sys
from pathlib import Path

# main reads settings at import time
os.environ.setdefault("ENVIRONMENT", "testing")

tests_dir = Path(__file__).parent
project_root = tests_dir.parent
for path in (project_root, tests_dir):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))
