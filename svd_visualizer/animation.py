# -*- coding: utf-8 -*-
"""GIF animation of a vector moving through x → Vᵀx → ΣVᵀx → UΣVᵀx."""

from __future__ import annotations

import logging
import os
import tempfile

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.animation import PillowWriter

from .config import AXIS_COLORS, AXIS_LENGTH, C_SIGMA_VT_X, C_U_SIGMA_VT_X, C_VT_X, C_X
from .core import DerivedChain
from .scene import scene_range

logger = logging.getLogger(__name__)

STAGE_LABELS = ["x", "Vᵀ · x", "Σ · Vᵀ · x", "U · Σ · Vᵀ · x"]
STAGE_COLORS = [C_X, C_VT_X, C_SIGMA_VT_X, C_U_SIGMA_VT_X]


def interpolate_chain(chain: DerivedChain, t: float) -> np.ndarray:
    """Position of the vector at path time ``t`` in [0, 3].

    t = 0, 1, 2, 3 hit the four chain stages; between them the vector moves
    in a straight line.
    """
    stages = [np.asarray(s, dtype=float) for s in chain]
    t = float(np.clip(t, 0.0, 3.0))
    i = min(int(t), 2)
    alpha = t - i
    return (1.0 - alpha) * stages[i] + alpha * stages[i + 1]


def _stage_index(t):
    # Stage the moving vector is heading towards; 0 only at the very start
    return min(max(int(np.ceil(t - 1e-9)), 0), 3)


def create_chain_gif(filename, chain: DerivedChain, n_frames=90, fps=30):
    if n_frames < 2:
        raise ValueError(f"Need at least 2 frames, got {n_frames}")

    lo, hi = scene_range(list(chain))

    fig = plt.figure(figsize=(6.4, 6.4))
    ax = fig.add_subplot(111, projection="3d")

    writer = PillowWriter(fps=fps)

    try:
        with writer.saving(fig, filename, dpi=100):
            for frame in range(n_frames):
                t = 3.0 * frame / (n_frames - 1)
                p = interpolate_chain(chain, t)
                stage = _stage_index(t)

                ax.cla()

                for axis, color in enumerate(AXIS_COLORS):
                    end = np.zeros(3)
                    end[axis] = AXIS_LENGTH
                    ax.plot([0, end[0]], [0, end[1]], [0, end[2]], color=color, linewidth=1.0)

                # Reached stages stay on screen as faint arrows
                for k in range(stage):
                    s = np.asarray(chain[k], dtype=float)
                    ax.quiver(0, 0, 0, s[0], s[1], s[2],
                              color=STAGE_COLORS[k], alpha=0.35, arrow_length_ratio=0.08,
                              label=STAGE_LABELS[k])

                ax.quiver(0, 0, 0, p[0], p[1], p[2],
                          color=STAGE_COLORS[stage], linewidth=2.5, arrow_length_ratio=0.08,
                          label=STAGE_LABELS[stage])

                ax.set_xlim(lo, hi)
                ax.set_ylim(lo, hi)
                ax.set_zlim(lo, hi)
                ax.set_box_aspect((1, 1, 1))
                ax.view_init(elev=30, azim=45)

                ax.set_xlabel("x")
                ax.set_ylabel("y")
                ax.set_zlabel("z")

                ax.set_title(f"SVD chain: t = {t:.2f}")
                ax.legend(loc="upper left")

                writer.grab_frame()
    finally:
        plt.close(fig)
    logger.info(f"Wrote {n_frames} frames to {filename}")


def render_chain_gif(chain: DerivedChain, n_frames=90, fps=30) -> bytes:
    """Render the chain animation and return the GIF bytes."""
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "chain.gif")
        create_chain_gif(path, chain, n_frames=n_frames, fps=fps)
        with open(path, "rb") as f:
            return f.read()
