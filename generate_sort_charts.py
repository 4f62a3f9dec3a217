"""
Generate the benchmark comparison charts.
Run:  python generate_sort_charts.py --sizes 100 500 1000 2000 --trials 3
Output: sort_charts/ folder with 3 PNG files.
"""

import sys
import os

# Ensure project root is on the path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from sortsuite.charts import main

if __name__ == "__main__":
    sys.exit(main())
