#!/usr/bin/env python3
"""Filter Grid launcher script.

This script serves as the main entry point for the filter-grid command.
It can be installed as a console script via setuptools.
"""

import sys
from filter_grid.main import main

if __name__ == "__main__":
    sys.exit(main())
