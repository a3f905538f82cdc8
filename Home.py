# -*- coding: utf-8 -*-
"""
SVD Visualizer

Edit a 3×3 matrix A and a vector x. The page shows A·x directly and then
rebuilds it one factor at a time through A = U · Σ · Vᵀ, drawing every
intermediate vector as an arrow in 3D.

Run with:  streamlit run Home.py
"""

import logging

import streamlit as st
from streamlit_plotly_events import plotly_events

from svd_visualizer.animation import render_chain_gif
from svd_visualizer.camera import CAMERA_KEY, default_camera, update_camera_from_events
from svd_visualizer.config import (
    C_SIGMA_VT_X,
    C_U_SIGMA_VT_X,
    C_VT_X,
    C_X,
    DEFAULT_MATRIX,
    DEFAULT_VECTOR,
    GIF_FILENAME,
    PAGE_TITLE,
    SCENE_HEIGHT,
    UIREVISION_KEY,
    matrix_cell_key,
    vector_cell_key,
)
from svd_visualizer.core import recompute
from svd_visualizer.formatting import matrix_to_latex, vector_to_latex
from svd_visualizer.scene import Arrow, make_vector_scene

logger = logging.getLogger(__name__)

GIF_STATE_KEY = "chain_gif"


# ---------- Session state ----------

def init_session_state():
    for r, row in enumerate(DEFAULT_MATRIX):
        for c, value in enumerate(row):
            st.session_state.setdefault(matrix_cell_key(r, c), value)
    for i, value in enumerate(DEFAULT_VECTOR):
        st.session_state.setdefault(vector_cell_key(i), value)

    if CAMERA_KEY not in st.session_state:
        st.session_state[CAMERA_KEY] = default_camera()
    if "uirevision_key" not in st.session_state:
        st.session_state.uirevision_key = UIREVISION_KEY


def reset_inputs():
    for r, row in enumerate(DEFAULT_MATRIX):
        for c, value in enumerate(row):
            st.session_state[matrix_cell_key(r, c)] = value
    for i, value in enumerate(DEFAULT_VECTOR):
        st.session_state[vector_cell_key(i)] = value


def read_matrix_text():
    return [
        [st.session_state[matrix_cell_key(r, c)] for c in range(3)]
        for r in range(3)
    ]


def read_vector_text():
    return [st.session_state[vector_cell_key(i)] for i in range(3)]


def snapshot_key(state):
    return tuple(state.matrix.ravel().tolist()) + tuple(state.vector.tolist())


# ---------- Display helpers ----------

def vector_display(label, values, highlight=False, color=C_U_SIGMA_VT_X):
    body = vector_to_latex(values)
    if highlight:
        body = r"\color{%s}{%s}" % (color, body)
    st.latex(rf"{label} = {body}")


def scene_panel(arrows, title, key):
    fig = make_vector_scene(
        arrows,
        title=title,
        camera=st.session_state[CAMERA_KEY],
        uirevision_key=st.session_state.uirevision_key,
    )
    events = plotly_events(
        fig,
        click_event=False,
        select_event=False,
        hover_event=True,
        override_height=SCENE_HEIGHT,
        key=key,
    )
    update_camera_from_events(events, st.session_state)


# ---------- Streamlit app ----------

def main():
    st.set_page_config(page_title=PAGE_TITLE, layout="wide")
    init_session_state()

    st.title(PAGE_TITLE)
    st.write(
        """
        Adjust a **3×3 transformation matrix** and a **vector**. See the raw matrix product,
        the SVD factors (U, Σ, Vᵀ), and how each step transforms the vector in 3D space.
        """
    )

    st.sidebar.header("Inputs")
    st.sidebar.button("Reset to identity", on_click=reset_inputs)

    col_in, col_out = st.columns([1.2, 0.8])

    with col_in:
        st.subheader("Matrix & Vector")
        st.caption("Enter values below to drive the visualization.")

        st.markdown("**Transformation Matrix (3×3)**")
        for r in range(3):
            cells = st.columns(3)
            for c in range(3):
                with cells[c]:
                    st.text_input(
                        f"Matrix cell [{r + 1}, {c + 1}]",
                        key=matrix_cell_key(r, c),
                        label_visibility="collapsed",
                    )

        st.markdown("**Input Vector**")
        cells = st.columns(3)
        for i in range(3):
            with cells[i]:
                st.text_input(
                    f"Vector component {i + 1}",
                    key=vector_cell_key(i),
                    label_visibility="collapsed",
                )

    # Full recomputation on every rerun
    state = recompute(read_matrix_text(), read_vector_text())
    chain = state.chain

    with col_out:
        st.subheader("Matrix × Vector Output")
        st.caption("Direct multiplication result.")
        vector_display(r"A\,x", state.product)

        if state.svd_available:
            st.markdown("---")
            st.write(
                "**Cross-check.** ‖U Σ Vᵀ x‖ equals ‖Ax‖ within floating point precision. "
                "Track intermediate values below."
            )
            c1, c2, c3 = st.columns(3)
            with c1:
                vector_display(r"V^T x", chain.vt_x)
            with c2:
                vector_display(r"\Sigma V^T x", chain.sigma_vt_x)
            with c3:
                vector_display(r"U \Sigma V^T x", chain.u_sigma_vt_x, highlight=True)
        else:
            st.info("SVD unavailable for the current matrix.")

    if state.svd_available:
        st.markdown("---")
        st.subheader("Singular Value Decomposition")
        st.latex(r"A = U \cdot \Sigma \cdot V^T")
        m1, m2, m3 = st.columns(3)
        with m1:
            st.latex(matrix_to_latex(state.svd.u, "U"))
        with m2:
            st.latex(matrix_to_latex(state.svd.sigma, r"\Sigma"))
        with m3:
            st.latex(matrix_to_latex(state.svd.vt, "V^T"))

    st.markdown("---")
    s1, s2 = st.columns(2)

    with s1:
        st.subheader("Original Vector")
        st.caption("See the starting direction with axes for reference.")
        scene_panel(
            [Arrow(chain.x, C_X, "x")],
            title="x",
            key="plotly_events_original",
        )

    with s2:
        st.subheader("SVD Transform Steps")
        st.caption("Follow each operation applied to the vector.")
        scene_panel(
            [
                Arrow(chain.vt_x, C_VT_X, "Vᵀ · x"),
                Arrow(chain.sigma_vt_x, C_SIGMA_VT_X, "Σ · Vᵀ · x"),
                Arrow(chain.u_sigma_vt_x, C_U_SIGMA_VT_X, "U · Σ · Vᵀ · x"),
            ],
            title="Vᵀ, then Σ, then U",
            key="plotly_events_steps",
        )
        st.caption(
            "All arrows originate at the origin. Pink rotates the vector with Vᵀ, orange scales it "
            "via Σ, and green applies the final U rotation, matching the Ax result."
        )

    # ---------- GIF generation ----------
    st.markdown("## GIF animation of the SVD steps")

    # The GIF lives in this session only and is shown while the inputs it was drawn from are current
    inputs_key = snapshot_key(state)

    if st.button("Generate GIF animation"):
        with st.spinner("Generating GIF animation..."):
            try:
                data = render_chain_gif(chain, n_frames=90, fps=30)
                st.session_state[GIF_STATE_KEY] = {"inputs": inputs_key, "data": data}
                st.success("Animation generated")
            except Exception as e:
                logger.exception("GIF generation failed")
                st.error(f"Failed to create animation. Error: {e}")

    gif = st.session_state.get(GIF_STATE_KEY)
    if gif is not None and gif["inputs"] == inputs_key:
        vc1, vc2, vc3 = st.columns([1, 2, 1])
        with vc2:
            st.image(gif["data"])
            st.download_button("Download GIF", gif["data"], file_name=GIF_FILENAME, mime="image/gif")
    elif gif is not None:
        st.caption("The matrix or vector changed since the last animation; generate it again to see the new steps.")


if __name__ == "__main__":
    main()
