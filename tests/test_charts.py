import unittest
import sys
import os
import io
import tempfile
from contextlib import redirect_stdout

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from sortsuite import charts
from sortsuite.benchmark import run_benchmark


class TestCharts(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.rows = run_benchmark([20, 80], trials=1, seed=4, max_quadratic_size=50)

    def test_generate_charts_writes_pngs(self):
        with tempfile.TemporaryDirectory() as tmp:
            with redirect_stdout(io.StringIO()):
                paths = charts.generate_charts(self.rows, tmp)
            self.assertEqual(len(paths), 3)
            for path in paths:
                self.assertTrue(os.path.exists(path))
                with open(path, "rb") as f:
                    self.assertEqual(f.read(8), b"\x89PNG\r\n\x1a\n")

    def test_mean_times_skip_missing_cells(self):
        means = charts._mean_times_by_size(self.rows)
        self.assertEqual(set(means["merge"]), {20, 80})
        self.assertEqual(set(means["bubble"]), {20})

    def test_every_algorithm_has_a_colour(self):
        self.assertEqual(set(charts.COLORS), {"bubble", "selection", "insertion", "merge", "quick"})

    def test_main(self):
        with tempfile.TemporaryDirectory() as tmp:
            out_dir = os.path.join(tmp, "charts")
            with redirect_stdout(io.StringIO()):
                status = charts.main(["--sizes", "10", "30", "--trials", "1",
                                      "--seed", "1", "--out-dir", out_dir])
            self.assertEqual(status, 0)
            self.assertEqual(len(os.listdir(out_dir)), 3)


if __name__ == '__main__':
    unittest.main()
