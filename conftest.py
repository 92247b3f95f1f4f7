# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Error-Tracking-Bridge contributors

"""Root conftest.py to ensure the bridge package is importable from tests."""

import sys
from pathlib import Path

# Add repo root to sys.path so error_tracking_bridge can be imported without install
_repo_root = Path(__file__).parent
if str(_repo_root) not in sys.path:
    sys.path.insert(0, str(_repo_root))
