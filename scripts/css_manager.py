#!/usr/bin/env python3
"""CSS Editor Management CLI launcher

Runs css_editor.management.css_manager from a source checkout.
"""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from css_editor.management.css_manager import main

if __name__ == "__main__":
    sys.exit(main())
