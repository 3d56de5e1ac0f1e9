import io
import unittest

from prefixsum.checks import run_sanity_checks, run_stress_check
from prefixsum.demo import run_demo
from prefixsum.__main__ import main


class SanityCheckTests(unittest.TestCase):
    def test_reference_scenarios(self):
        self.assertEqual(run_sanity_checks(), 26)

    def test_mismatch_raises(self):
        scenarios = [(2, [([(0, 1)], {1: 2})])]
        with self.assertRaises(AssertionError) as context:
            run_sanity_checks(scenarios)
        self.assertIn('query(1) returned 1, expected 2', str(context.exception))


class StressCheckTests(unittest.TestCase):
    def test_stress(self):
        n_checked = run_stress_check(capacity=64, n_operations=2000, seed=0, verbose=False)
        self.assertGreater(n_checked, 0)
        self.assertLess(n_checked, 2000)

    def test_stress_with_progress_bar(self):
        self.assertGreater(run_stress_check(capacity=8, n_operations=50, seed=1, verbose=True), 0)

    def test_deterministic_with_seed(self):
        first = run_stress_check(capacity=10, n_operations=300, seed=5, verbose=False)
        second = run_stress_check(capacity=10, n_operations=300, seed=5, verbose=False)
        self.assertEqual(first, second)

    def test_rejects_empty_capacity(self):
        with self.assertRaises(ValueError):
            run_stress_check(capacity=0, verbose=False)


class DemoTests(unittest.TestCase):
    def test_demo(self):
        stream = io.StringIO()
        printed = run_demo(stream)

        self.assertEqual(printed, [(0, 10), (1, 10), (2, 15), (4, 15), (5, 22), (9, 25)])
        lines = stream.getvalue().splitlines()
        self.assertEqual(lines[0], 'Sum up to index 0: 10')
        self.assertEqual(lines[-1], 'Sum up to index 9: 25')


class MainTests(unittest.TestCase):
    def test_main(self):
        stream = io.StringIO()
        printed = main(stream)

        lines = stream.getvalue().splitlines()
        self.assertEqual(lines[0], 'Sanity checks passed (26 queries)')
        self.assertEqual(len(lines), 7)
        self.assertEqual(printed[-1], (9, 25))


if __name__ == '__main__':
    unittest.main()
