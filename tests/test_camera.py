"""Tests for camera persistence."""

import unittest

from svd_visualizer.camera import CAMERA_KEY, default_camera, update_camera_from_events
from svd_visualizer.config import DEFAULT_CAMERA


class TestCamera(unittest.TestCase):

    def setUp(self):
        self.state = {CAMERA_KEY: default_camera()}

    def test_no_events(self):
        self.assertIsNone(update_camera_from_events([], self.state))
        self.assertIsNone(update_camera_from_events(None, self.state))
        self.assertEqual(self.state[CAMERA_KEY], DEFAULT_CAMERA)

    def test_whole_camera_event(self):
        cam = {"eye": {"x": 2.0, "y": 0.5, "z": 1.0}, "up": {"x": 0, "y": 0, "z": 1}}
        update_camera_from_events([{"scene.camera": cam}], self.state)
        self.assertEqual(self.state[CAMERA_KEY]["eye"]["x"], 2.0)

    def test_flattened_keys_merge_into_current(self):
        update_camera_from_events([{"scene.camera.eye.x": "3.5"}], self.state)
        eye = self.state[CAMERA_KEY]["eye"]
        self.assertEqual(eye["x"], 3.5)
        self.assertEqual(eye["y"], DEFAULT_CAMERA["eye"]["y"])

    def test_incomplete_camera_falls_back_to_default(self):
        update_camera_from_events([{"scene.camera": {"eye": {"x": 1.0}}}], self.state)
        self.assertEqual(self.state[CAMERA_KEY], DEFAULT_CAMERA)

    def test_unrelated_events_ignored(self):
        result = update_camera_from_events([{"x": 1, "y": 2}, "junk"], self.state)
        self.assertIsNone(result)

    def test_partial_events_in_one_batch_accumulate(self):
        update_camera_from_events(
            [{"scene.camera.eye.x": 3.0}, {"scene.camera.up.z": 0.5}], self.state
        )
        cam = self.state[CAMERA_KEY]
        self.assertEqual(cam["eye"]["x"], 3.0)
        self.assertEqual(cam["up"]["z"], 0.5)
        self.assertEqual(cam["eye"]["y"], DEFAULT_CAMERA["eye"]["y"])

    def test_partial_event_after_whole_camera(self):
        cam = {"eye": {"x": 2.0, "y": 2.0, "z": 2.0}, "up": {"x": 0, "y": 0, "z": 1}}
        update_camera_from_events([{"scene.camera": cam}, {"scene.camera.eye.z": 0.1}], self.state)
        eye = self.state[CAMERA_KEY]["eye"]
        self.assertEqual((eye["x"], eye["y"], eye["z"]), (2.0, 2.0, 0.1))

    def test_default_not_mutated(self):
        update_camera_from_events([{"scene.camera.eye.x": 9.0}], self.state)
        self.assertNotEqual(DEFAULT_CAMERA["eye"]["x"], 9.0)


if __name__ == "__main__":
    unittest.main()
