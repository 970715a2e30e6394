#!/usr/bin/env python3
"""
Main script for running the infusion dose calculator.
"""

# Flow:
# 1) Parse flags into an Inputs record (or pick the worked examples).
# 2) Validate that grams, base made, base used and servings are present.
# 3) Compute total THC, concentration per unit, recipe and per-serving doses.
# 4) Print the results.

import logging
import os
import sys

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from infuse.cli import main

if __name__ == "__main__":
    sys.exit(main())
