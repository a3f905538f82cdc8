"""SVD Visualizer.

Edit a 3×3 matrix and a vector, then watch the product A·x next to the
SVD factors U, Σ, Vᵀ applied one step at a time in 3D.
"""

from __future__ import annotations

__version__ = "0.1.0"
