import os
import cv2

from engine.errors import CameraOpenError, FrameReadError, WriterOpenError


class CameraSource:
    def __init__(self, camera_index=0):
        self.camera_index = camera_index
        self.cap = cv2.VideoCapture(camera_index)

        if not self.cap.isOpened():
            self.cap.release()
            self.cap = None
            raise CameraOpenError(f"Cannot open camera: {camera_index}")

    def read(self):
        if self.cap is None:
            raise FrameReadError("Camera already released")

        ret, frame = self.cap.read()
        if not ret or frame is None or frame.size == 0:
            raise FrameReadError(
                f"Cannot read a frame from camera: {self.camera_index}"
            )

        return frame

    def release(self):
        if self.cap is not None:
            self.cap.release()
            self.cap = None


def open_video_writer(video_path: str, fourcc="MJPG", fps=30, size=(640, 480)):
    """
    Opens an OpenCV video writer for colour frames of `size` (width, height).
    The parent folder is created when missing.
    """
    out_dir = os.path.dirname(video_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    writer = cv2.VideoWriter(
        str(video_path),
        cv2.VideoWriter_fourcc(*fourcc),
        fps,
        tuple(size),
        True,
    )

    if not writer.isOpened():
        writer.release()
        raise WriterOpenError(f"Cannot open video writer: {video_path}")

    return writer


def write_video_frame(writer, frame, size):
    # VideoWriter silently drops frames whose size differs from the one it was opened with
    width, height = size
    if frame.shape[1] != width or frame.shape[0] != height:
        frame = cv2.resize(frame, (width, height), interpolation=cv2.INTER_AREA)

    writer.write(frame)


def save_image(path, image):
    try:
        ok = cv2.imwrite(str(path), image)
    except cv2.error as e:
        raise RuntimeError(f"Cannot write image: {path}") from e

    if not ok:
        raise RuntimeError(f"Cannot write image: {path}")

    return str(path)
