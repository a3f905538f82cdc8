# -*- coding: utf-8 -*-
"""
Page defaults, colours and scene sizing for the SVD visualizer.
"""

PAGE_TITLE = "SVD Visualizer"

# ---------- Editable state defaults ----------

DEFAULT_MATRIX = [
    ["1", "0", "0"],
    ["0", "1", "0"],
    ["0", "0", "1"],
]

DEFAULT_VECTOR = ["1", "0", "0"]

FRACTION_DIGITS = 4

# ---------- Arrow colours ----------

C_X = "#6366f1"             # indigo
C_VT_X = "#ec4899"          # pink
C_SIGMA_VT_X = "#f97316"    # orange
C_U_SIGMA_VT_X = "#10b981"  # green

AXIS_COLORS = ["#ef4444", "#22c55e", "#3b82f6"]  # x, y, z
GRID_COLOR = "#e5e7eb"

# ---------- Scene sizing ----------

AXIS_LENGTH = 2.5
GRID_EXTENT = 5.0
GRID_STEP = 1.0
CONE_SIZE = 0.22
LABEL_OFFSET = 1.05
SCENE_HEIGHT = 420

DEFAULT_CAMERA = dict(
    eye=dict(x=1.4, y=1.4, z=1.4),
    up=dict(x=0, y=0, z=1),
)

UIREVISION_KEY = "keep_camera_svd_scene_v1"

GIF_FILENAME = "svd_chain_animation.gif"


def matrix_cell_key(row, col):
    return f"m_{row}{col}"


def vector_cell_key(index):
    return f"x_{index}"
