# -*- coding: utf-8 -*-
"""Numeric core of the SVD visualizer.

Turns the raw text of the matrix and vector inputs into numbers, computes the
product A·x, the singular value decomposition A = U·Σ·Vᵀ and the chain of
intermediate vectors Vᵀ·x, Σ·Vᵀ·x, U·Σ·Vᵀ·x. Every function here is total:
bad text becomes 0, mismatched shapes are zero-filled and a failed
decomposition is reported as ``None``.
"""

from __future__ import annotations

import logging
import math
import re
from typing import NamedTuple, Optional, Sequence

import numpy as np

logger = logging.getLogger(__name__)

# Leading decimal literal: sign, digits with optional fraction, optional exponent
_DECIMAL_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)


class SVDResult(NamedTuple):
    """Factors of A = U · Σ · Vᵀ."""

    u: np.ndarray
    sigma: np.ndarray
    vt: np.ndarray


class DerivedChain(NamedTuple):
    """The input vector after each stage of the factorized transform."""

    x: np.ndarray
    vt_x: np.ndarray
    sigma_vt_x: np.ndarray
    u_sigma_vt_x: np.ndarray


class VisualizerState(NamedTuple):
    """Output snapshot of one recomputation."""

    matrix: np.ndarray
    vector: np.ndarray
    product: np.ndarray
    svd: Optional[SVDResult]
    chain: DerivedChain

    @property
    def svd_available(self) -> bool:
        return self.svd is not None


# ---------- Parsing ----------

def parse_cell_value(value) -> float:
    """Parse a cell's text into a finite float.

    The longest leading decimal literal is used, so partially typed input
    such as ``"1."`` or ``"2e"`` still yields a number. Anything that does
    not produce a finite value (``""``, ``"-"``, ``"NaN"``, ``"Infinity"``,
    ``"1e999"``) becomes ``0.0``.
    """
    # Leading whitespace may be any Unicode space; the number itself is ASCII only
    match = _DECIMAL_PREFIX.match(str(value).lstrip())
    if match is None:
        return 0.0
    parsed = float(match.group(1))
    return parsed if math.isfinite(parsed) else 0.0


def to_numeric_matrix(values: Sequence[Sequence[str]]) -> np.ndarray:
    return np.array([[parse_cell_value(cell) for cell in row] for row in values], dtype=float)


def to_numeric_vector(values: Sequence[str]) -> np.ndarray:
    return np.array([parse_cell_value(cell) for cell in values], dtype=float)


# ---------- Matrix helpers ----------

def multiply_matrix_vector(matrix, vector) -> np.ndarray:
    """Multiply an R×C matrix by a vector of any length.

    Only the first C entries of ``vector`` are used; missing entries count as
    zero.

    Args:
        matrix: R×C array-like
        vector: 1-D array-like

    Returns:
        Length-R vector
    """
    matrix = np.asarray(matrix, dtype=float)
    vector = np.asarray(vector, dtype=float).ravel()
    if matrix.ndim != 2 or matrix.shape[0] == 0:
        return np.zeros(0)

    columns = matrix.shape[1]
    padded = np.zeros(columns)
    n = min(columns, vector.size)
    padded[:n] = vector[:n]
    return matrix @ padded


def transpose(matrix) -> np.ndarray:
    matrix = np.asarray(matrix, dtype=float)
    if matrix.ndim != 2 or matrix.shape[0] == 0:
        return np.empty((0, 0))
    return matrix.T.copy()


def build_sigma_matrix(diagonal, rows: int, columns: int) -> np.ndarray:
    """Zero matrix of shape (rows, columns) carrying ``diagonal`` on its main diagonal."""
    diagonal = np.asarray(diagonal, dtype=float).ravel()
    sigma = np.zeros((rows, columns))
    k = min(rows, columns, diagonal.size)
    idx = np.arange(k)
    sigma[idx, idx] = diagonal[:k]
    return sigma


# ---------- SVD ----------

def compute_svd(matrix) -> Optional[SVDResult]:
    """Compute A = U · Σ · Vᵀ.

    Singular values keep the (descending) order numpy returns them in and the
    signs of the singular vectors are left as they come.

    Args:
        matrix: R×C array-like, normally 3×3

    Returns:
        SVDResult, or None when the decomposition is unavailable
    """
    matrix = np.asarray(matrix, dtype=float)
    try:
        u, singular_values, vh = np.linalg.svd(matrix)
    except (np.linalg.LinAlgError, ValueError) as exc:
        logger.debug(f"SVD unavailable for matrix {matrix.tolist()}: {exc}")
        return None

    if not np.all(np.isfinite(singular_values)):
        logger.debug(f"SVD produced non-finite singular values: {singular_values}")
        return None

    # numpy hands back Vᵀ; keep V as the right singular vectors and derive Vᵀ from it
    v = vh.T
    rows, columns = matrix.shape
    sigma = build_sigma_matrix(singular_values, rows, columns)
    vt = transpose(v)

    logger.debug(f"Singular values: {singular_values}")
    return SVDResult(u=u, sigma=sigma, vt=vt)


def compute_derived_chain(svd_result: Optional[SVDResult], vector) -> DerivedChain:
    """Apply Vᵀ, then Σ, then U to ``vector``.

    Without an SVD every derived stage is the zero 3-vector.
    """
    x = np.asarray(vector, dtype=float)
    if svd_result is None:
        return DerivedChain(x=x, vt_x=np.zeros(3), sigma_vt_x=np.zeros(3), u_sigma_vt_x=np.zeros(3))

    vt_x = multiply_matrix_vector(svd_result.vt, x)
    sigma_vt_x = multiply_matrix_vector(svd_result.sigma, vt_x)
    u_sigma_vt_x = multiply_matrix_vector(svd_result.u, sigma_vt_x)
    return DerivedChain(x=x, vt_x=vt_x, sigma_vt_x=sigma_vt_x, u_sigma_vt_x=u_sigma_vt_x)


# ---------- Pipeline ----------

def recompute(matrix_text: Sequence[Sequence[str]], vector_text: Sequence[str]) -> VisualizerState:
    """Run parse → multiply → SVD → chain on a snapshot of the inputs."""
    matrix = to_numeric_matrix(matrix_text)
    vector = to_numeric_vector(vector_text)
    product = multiply_matrix_vector(matrix, vector)
    svd_result = compute_svd(matrix)
    chain = compute_derived_chain(svd_result, vector)
    return VisualizerState(
        matrix=matrix,
        vector=vector,
        product=product,
        svd=svd_result,
        chain=chain,
    )
