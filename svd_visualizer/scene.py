# -*- coding: utf-8 -*-
"""Plotly 3D scenes with vectors drawn as arrows from the origin."""

from __future__ import annotations

from typing import NamedTuple, Optional, Sequence, Tuple

import numpy as np
import plotly.graph_objects as go

from .config import (
    AXIS_COLORS,
    AXIS_LENGTH,
    CONE_SIZE,
    GRID_COLOR,
    GRID_EXTENT,
    GRID_STEP,
    LABEL_OFFSET,
    SCENE_HEIGHT,
)


class Arrow(NamedTuple):
    vector: np.ndarray
    color: str
    label: str


class ArrowGeometry(NamedTuple):
    tip: np.ndarray
    direction: np.ndarray  # unit length


def _as_vector3(vector) -> np.ndarray:
    v = np.asarray(vector, dtype=float).ravel()
    if v.shape != (3,):
        raise ValueError(f"Expected a 3-vector, got shape {v.shape}")
    return v


# ---------- Geometry helpers ----------

def arrow_geometry(vector) -> Optional[ArrowGeometry]:
    """Tip and unit direction of an arrow from the origin; None for the zero vector."""
    tip = _as_vector3(vector)
    length = np.linalg.norm(tip)
    if length == 0 or not np.isfinite(length):
        return None
    return ArrowGeometry(tip=tip, direction=tip / length)


def build_grid_lines(extent=GRID_EXTENT, step=GRID_STEP):
    """Line segments of a square grid on the z = 0 plane, separated by None."""
    ticks = np.arange(-extent, extent + step / 2, step)
    xs, ys, zs = [], [], []
    for t in ticks:
        xs.extend([-extent, extent, None])
        ys.extend([t, t, None])
        zs.extend([0.0, 0.0, None])

        xs.extend([t, t, None])
        ys.extend([-extent, extent, None])
        zs.extend([0.0, 0.0, None])
    return xs, ys, zs


def scene_range(vectors: Sequence, margin_factor=1.15) -> Tuple[float, float]:
    """Symmetric axis range that fits the axes helper and every arrow with its label."""
    half = AXIS_LENGTH
    for v in vectors:
        v = np.asarray(v, dtype=float).ravel()
        finite = v[np.isfinite(v)]
        if finite.size:
            half = max(half, LABEL_OFFSET * np.abs(finite).max())
    half *= margin_factor
    return -half, half


# ---------- Traces ----------

def add_reference_axes(fig, length=AXIS_LENGTH):
    xs, ys, zs = build_grid_lines()
    fig.add_trace(go.Scatter3d(
        x=xs, y=ys, z=zs,
        mode="lines",
        line=dict(width=1, color=GRID_COLOR),
        showlegend=False,
        hoverinfo="skip",
        name="__grid__",
    ))

    for axis, color in enumerate(AXIS_COLORS):
        end = np.zeros(3)
        end[axis] = length
        fig.add_trace(go.Scatter3d(
            x=[0, end[0]], y=[0, end[1]], z=[0, end[2]],
            mode="lines",
            line=dict(width=3, color=color),
            showlegend=False,
            hoverinfo="skip",
            name=f"__axis_{'xyz'[axis]}__",
        ))


def add_vector_arrow(fig, vector, color, label) -> bool:
    """Draw ``vector`` as shaft + cone + label. Returns False when nothing was drawn."""
    geom = arrow_geometry(vector)
    if geom is None:
        return False

    tip = geom.tip
    fig.add_trace(go.Scatter3d(
        x=[0, tip[0]], y=[0, tip[1]], z=[0, tip[2]],
        mode="lines",
        line=dict(width=6, color=color),
        name=label,
        legendgroup=label,
        showlegend=True,
        hovertemplate=f"{label}<br>x=%{{x:.3f}}<br>y=%{{y:.3f}}<br>z=%{{z:.3f}}<extra></extra>",
    ))

    u, v, w = geom.direction
    fig.add_trace(go.Cone(
        x=[tip[0]], y=[tip[1]], z=[tip[2]],
        u=[u], v=[v], w=[w],
        anchor="tip",
        sizemode="absolute",
        sizeref=CONE_SIZE,
        colorscale=[[0, color], [1, color]],
        showscale=False,
        legendgroup=label,
        showlegend=False,
        hoverinfo="skip",
        name=f"{label} head",
    ))

    label_pos = LABEL_OFFSET * tip
    fig.add_trace(go.Scatter3d(
        x=[label_pos[0]], y=[label_pos[1]], z=[label_pos[2]],
        mode="text",
        text=[label],
        textfont=dict(size=13, color="#111827"),
        legendgroup=label,
        showlegend=False,
        hoverinfo="skip",
        name=f"{label} label",
    ))
    return True


# ---------- Figure ----------

def make_vector_scene(arrows: Sequence[Arrow], title, camera, uirevision_key):
    """Shared scene: grid, axes helper and one arrow per entry of ``arrows``."""
    fig = go.Figure()
    fig.update_layout(template="plotly_white", showlegend=True)

    add_reference_axes(fig)
    for arrow in arrows:
        add_vector_arrow(fig, arrow.vector, arrow.color, arrow.label)

    lo, hi = scene_range([a.vector for a in arrows])
    axis_style = dict(range=[lo, hi], showbackground=False, showgrid=False, zeroline=False)

    fig.update_layout(
        uirevision=uirevision_key,
        scene=dict(
            xaxis=dict(axis_style, title="x"),
            yaxis=dict(axis_style, title="y"),
            zaxis=dict(axis_style, title="z"),
            aspectmode="cube",
        ),
        scene_camera=camera,
        margin=dict(l=0, r=0, t=40, b=0),
        legend=dict(x=0.02, y=0.98),
        title=title,
        height=SCENE_HEIGHT,
    )
    return fig
