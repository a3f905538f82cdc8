"""Tests for display formatting."""

import unittest

import numpy as np
import pytest

from svd_visualizer.formatting import (
    format_matrix,
    format_number,
    format_vector,
    matrix_to_latex,
    vector_to_latex,
)


@pytest.mark.parametrize("value, expected", [
    (1.23456, "1.2346"),
    (0, "0"),
    (0.0, "0"),
    (-0.0, "0"),
    (1.0, "1"),
    (-2.5, "-2.5"),
    (0.1 + 0.2, "0.3"),
    (1234567.5, "1,234,567.5"),
    (-9876.54321, "-9,876.5432"),
    (0.00004, "0"),
    (-0.00004, "0"),
    (1e-4, "0.0001"),
    (np.float64(3.14159265), "3.1416"),
])
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_exact_ties_round_away_from_zero():
    # 0.03125 and 1.03125 are exact binary values sitting on the 5th-digit tie
    assert format_number(0.03125) == "0.0313"
    assert format_number(-0.03125) == "-0.0313"
    assert format_number(1.03125) == "1.0313"


def test_non_finite():
    assert format_number(float("nan")) == "NaN"
    assert format_number(float("inf")) == "∞"
    assert format_number(float("-inf")) == "-∞"


def test_huge_value():
    assert format_number(1e21) == "1,000,000,000,000,000,000,000"


class TestCollections(unittest.TestCase):
    """Test vector/matrix helpers built on format_number."""

    def test_format_vector(self):
        self.assertEqual(format_vector(np.array([1.0, 0.5, -1 / 3])), ["1", "0.5", "-0.3333"])

    def test_format_matrix(self):
        self.assertEqual(format_matrix(np.eye(2)), [["1", "0"], ["0", "1"]])

    def test_matrix_to_latex(self):
        latex = matrix_to_latex(np.diag([5.0, 3.0, 1.0]), r"\Sigma")
        self.assertTrue(latex.startswith(r"\Sigma = \begin{bmatrix}"))
        self.assertIn(r"5 & 0 & 0 \\ 0 & 3 & 0 \\ 0 & 0 & 1", latex)
        self.assertTrue(latex.endswith(r"\end{bmatrix}"))

    def test_latex_braces_thousands_separator(self):
        self.assertEqual(vector_to_latex([1234.5]), r"\begin{bmatrix}1{,}234.5\end{bmatrix}")


if __name__ == "__main__":
    unittest.main()
