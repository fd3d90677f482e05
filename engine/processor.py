import cv2

from engine.functions import (
    load_face_cascade,
    detect_faces,
    estimate_distance,
    draw_on_frame,
)
from engine.recorder import FaceRecorder
from engine.throttle import FrameThrottle
from utils.video_io import (
    CameraSource,
    open_video_writer,
    write_video_frame,
)


class FaceDetector:
    def __init__(self, config, logger=None):
        self.config = config
        self.log = logger or (lambda *_: None)

        self.camera = None
        self.writer = None
        self.frame = None

        self.frames_captured = 0
        self.frames_processed = 0
        self.faces_saved = 0

        self.throttle = FrameThrottle(config.speed_up_factor)
        self.recorder = FaceRecorder(
            faces_dir=config.faces_dir,
            image_ext=config.image_ext,
            reset_saved_flags=config.reset_saved_flags,
            logger=self.log,
        )

        # ---------------------------------------------------
        # Acquire camera -> cascade -> writer
        # ---------------------------------------------------
        self.camera = CameraSource(config.camera_index)
        try:
            self.cascade = load_face_cascade(config.cascade_path)
            self.writer = open_video_writer(
                config.output_video_path,
                fourcc=config.video_fourcc,
                fps=config.video_fps,
                size=config.video_size,
            )
        except Exception:
            self.release()
            raise

        self.log("🤖 Face detector initialized")
        self.log(
            f"📐 focal={config.focal_length}, face_width={config.real_face_width}cm, "
            f"speed_up={config.speed_up_factor}"
        )

    # ---------------------------------------------------------
    def process_frame(self):
        """
        Capture one frame and, if the throttle lets it through,
        detect, save new crops, annotate and append it to the video.

        Returns:
            True if the frame was processed, False if it was skipped.
        """
        frame = self.camera.read()
        self.frames_captured += 1

        # ⏭ Skip frames based on the speed-up factor
        if not self.throttle.should_process():
            return False

        gray = cv2.cvtColor(frame, cv2.COLOR_BGR2GRAY)
        faces = detect_faces(self.cascade, gray)

        # Crops come from the frame before any overlay is drawn
        written = self.recorder.record(frame, faces)
        self.faces_saved += len(written)

        distances = [
            estimate_distance(
                self.config.real_face_width,
                self.config.focal_length,
                w,
            )
            for (_, _, w, _) in faces
        ]
        draw_on_frame(frame, faces, distances)

        write_video_frame(self.writer, frame, self.config.video_size)

        self.frame = frame
        self.frames_processed += 1

        return True

    def display_frame(self, window_name):
        if self.frame is not None:
            cv2.imshow(window_name, self.frame)

    def release(self):
        if self.camera is not None:
            self.camera.release()
            self.camera = None

        if self.writer is not None:
            self.writer.release()
            self.writer = None

        cv2.destroyAllWindows()
