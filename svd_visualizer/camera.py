# -*- coding: utf-8 -*-
"""Keep the 3D camera where the user left it across Streamlit reruns.

``streamlit_plotly_events`` reports relayout events either as a whole
``scene.camera`` dict or as flattened ``scene.camera.eye.x`` keys. Both are
folded into ``session_state["plotly_camera"]``.
"""

from __future__ import annotations

import copy
import logging

from .config import DEFAULT_CAMERA

logger = logging.getLogger(__name__)

CAMERA_KEY = "plotly_camera"
_PREFIX = "scene.camera."


def default_camera():
    return copy.deepcopy(DEFAULT_CAMERA)


def _is_complete(cam):
    eye = cam.get("eye")
    return isinstance(eye, dict) and all(ax in eye for ax in ("x", "y", "z"))


def update_camera_from_events(events, session_state):
    """Fold camera relayout events into ``session_state``.

    Returns the stored camera, or None when no event carried one.
    """
    if not events:
        return None

    cam = None
    for e in events:
        if not isinstance(e, dict):
            continue

        if isinstance(e.get("scene.camera"), dict):
            cam = copy.deepcopy(e["scene.camera"])
        else:
            cam_update = {
                k[len(_PREFIX):]: v
                for k, v in e.items()
                if isinstance(k, str) and k.startswith(_PREFIX)
            }
            if not cam_update:
                continue

            # Partial updates stack on whatever earlier events in this batch produced
            base = cam if cam is not None else session_state.get(CAMERA_KEY, DEFAULT_CAMERA)
            cam = copy.deepcopy(base)
            cam["eye"] = dict(base.get("eye", DEFAULT_CAMERA["eye"]))
            cam["up"] = dict(base.get("up", DEFAULT_CAMERA["up"]))
            for subk, subv in cam_update.items():
                if "." not in subk:
                    continue
                top, leaf = subk.split(".", 1)
                cam.setdefault(top, {})
                try:
                    cam[top][leaf] = float(subv)
                except (TypeError, ValueError):
                    cam[top][leaf] = subv

    if cam is None:
        return None
    if not _is_complete(cam):
        logger.debug(f"Ignoring incomplete camera update: {cam}")
        cam = default_camera()

    session_state[CAMERA_KEY] = cam
    return cam
