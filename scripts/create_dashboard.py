#!/usr/bin/env python3
"""Create the NRDOT v2 process optimization dashboard in New Relic.

Usage:
    export NEW_RELIC_API_KEY=NRAK-...
    export NEW_RELIC_ACCOUNT_ID=1234567
    python scripts/create_dashboard.py

Writes dashboards/created-dashboard.json on success.
"""

import sys
from pathlib import Path

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.publisher.__main__ import main

if __name__ == "__main__":
    sys.exit(main())
