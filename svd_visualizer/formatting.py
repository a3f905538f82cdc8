# -*- coding: utf-8 -*-
"""Display formatting for numbers, vectors and matrices."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import List

from .config import FRACTION_DIGITS

_QUANTUM = Decimal(1).scaleb(-FRACTION_DIGITS)
# Wide enough for every finite double with FRACTION_DIGITS decimals
_CONTEXT = Context(prec=400)


def format_number(value) -> str:
    """Format a number for display with at most 4 fractional digits.

    The value is first cut to 4 decimals with round-half-away-from-zero on
    its exact binary value, then written with en-US separators: ``,`` for
    thousands, ``.`` for decimals, trailing zeros dropped.

    >>> format_number(1.23456)
    '1.2346'
    >>> format_number(1234567.5)
    '1,234,567.5'
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"

    rounded = Decimal(value).quantize(_QUANTUM, rounding=ROUND_HALF_UP, context=_CONTEXT)
    # Negative zero shows as "0" here, unlike the "-0" an en-US number formatter prints
    if rounded.is_zero():
        return "0"

    text = f"{rounded:,f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_vector(values) -> List[str]:
    return [format_number(v) for v in values]


def format_matrix(matrix) -> List[List[str]]:
    return [[format_number(v) for v in row] for row in matrix]


# ---------- LaTeX ----------

def _latex_cell(value) -> str:
    # Braced comma keeps math mode from adding space after the separator
    return format_number(value).replace(",", "{,}")


def matrix_to_latex(matrix, label=None) -> str:
    rows = [" & ".join(_latex_cell(v) for v in row) for row in matrix]
    body = r"\begin{bmatrix}" + r" \\ ".join(rows) + r"\end{bmatrix}"
    if label:
        return f"{label} = {body}"
    return body


def vector_to_latex(values, label=None) -> str:
    body = r"\begin{bmatrix}" + r" \\ ".join(_latex_cell(v) for v in values) + r"\end{bmatrix}"
    if label:
        return f"{label} = {body}"
    return body
