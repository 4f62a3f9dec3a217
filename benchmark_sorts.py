"""
Benchmark the five sorting algorithms and save the raw timings to CSV.
Run:  python benchmark_sorts.py --sizes 100 1000 5000 --trials 3
"""

import sys
import os

# Add project root to path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from sortsuite.benchmark import main

if __name__ == "__main__":
    sys.exit(main())
