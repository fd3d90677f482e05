import cv2
import numpy as np
import pytest

import engine.processor as processor_module
from utils.config import DetectorConfig


class FakeCapture:
    def __init__(self, frames, opened=True):
        self.frames = list(frames)
        self.opened = opened
        self.released = False

    def isOpened(self):
        return self.opened

    def read(self):
        if not self.frames:
            return False, None
        return True, self.frames.pop(0)

    def release(self):
        self.released = True


class FakeCascade:
    """Returns a scripted detection list per call (last one repeats)."""

    def __init__(self, detections):
        self.detections = list(detections) or [[]]
        self.calls = 0

    def detectMultiScale(self, gray, scaleFactor, minNeighbors, minSize):
        assert gray.ndim == 2
        idx = min(self.calls, len(self.detections) - 1)
        self.calls += 1
        return self.detections[idx]


class FakeWriter:
    def __init__(self):
        self.frames = []
        self.released = False

    def write(self, frame):
        self.frames.append(frame.copy())

    def release(self):
        self.released = True


def make_frame(width=640, height=480, value=90):
    frame = np.full((height, width, 3), value, dtype=np.uint8)
    # Some texture so crops are not uniform
    frame[::7, :, 1] = 200
    return frame


@pytest.fixture(autouse=True)
def no_gui(monkeypatch):
    shown = []
    monkeypatch.setattr(cv2, "imshow", lambda name, frame: shown.append(name))
    monkeypatch.setattr(cv2, "waitKey", lambda delay=0: -1)
    monkeypatch.setattr(cv2, "destroyAllWindows", lambda: None)
    return shown


@pytest.fixture
def config(tmp_path):
    return DetectorConfig(
        output_video_path=str(tmp_path / "faces" / "output_video.avi"),
        faces_dir=str(tmp_path / "faces"),
        speed_up_factor=1,
    )


@pytest.fixture
def fake_io(monkeypatch):
    """
    Patches camera, cascade and writer used by FaceDetector.
    Call the returned function with frames and scripted detections.
    """
    state = {}

    def install(frames, detections=(), opened=True):
        capture = FakeCapture(frames, opened=opened)
        cascade = FakeCascade(detections)
        writer = FakeWriter()

        monkeypatch.setattr(cv2, "VideoCapture", lambda index: capture)
        monkeypatch.setattr(processor_module, "load_face_cascade", lambda path: cascade)
        monkeypatch.setattr(
            processor_module,
            "open_video_writer",
            lambda path, fourcc, fps, size: writer,
        )

        state.update(capture=capture, cascade=cascade, writer=writer)
        return state

    return install
