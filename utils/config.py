import os

import cv2

from engine.throttle import check_speed_up_factor

# Camera calibration
FOCAL_LENGTH = 800              # Pixels, change based on camera calibration
REAL_FACE_WIDTH = 14.0          # Average human face width (cm)

# Capture
CAMERA_INDEX = 0
SPEED_UP_FACTOR = 2             # 1 = every frame, 2 = every other frame, ...

# Detection (Haar cascade)
CASCADE_PATH = os.path.join(
    cv2.data.haarcascades, "haarcascade_frontalface_default.xml"
)
SCALE_FACTOR = 1.1
MIN_NEIGHBORS = 3
MIN_FACE_SIZE = (30, 30)

# Output
FACES_DIR = "faces"
FACE_IMAGE_EXT = ".jpg"
OUTPUT_VIDEO_PATH = os.path.join(FACES_DIR, "output_video.avi")
VIDEO_FOURCC = "MJPG"
VIDEO_FPS = 30
VIDEO_SIZE = (640, 480)         # (width, height)

# Drawing (BGR)
BOX_COLOR = (50, 50, 255)
BOX_THICKNESS = 3
TEXT_COLOR = (255, 255, 255)
TEXT_SCALE = 1
TEXT_THICKNESS = 1
SUMMARY_POSITION = (10, 40)

# Presentation
WINDOW_NAME = "Face Detection"
QUIT_KEY = "q"
KEY_POLL_MS = 20


class DetectorConfig:
    def __init__(
        self,
        focal_length=FOCAL_LENGTH,
        real_face_width=REAL_FACE_WIDTH,
        output_video_path=OUTPUT_VIDEO_PATH,
        camera_index=CAMERA_INDEX,
        speed_up_factor=SPEED_UP_FACTOR,
        cascade_path=CASCADE_PATH,
        faces_dir=FACES_DIR,
        image_ext=FACE_IMAGE_EXT,
        video_fourcc=VIDEO_FOURCC,
        video_fps=VIDEO_FPS,
        video_size=VIDEO_SIZE,
        window_name=WINDOW_NAME,
        quit_key=QUIT_KEY,
        key_poll_ms=KEY_POLL_MS,
        reset_saved_flags=False,
    ):
        check_speed_up_factor(speed_up_factor)
        if focal_length <= 0 or real_face_width <= 0:
            raise ValueError("focal_length and real_face_width must be positive")
        if video_fps <= 0:
            raise ValueError(f"video_fps must be positive, got {video_fps}")
        if len(video_fourcc) != 4:
            raise ValueError(f"video_fourcc must be 4 characters, got {video_fourcc!r}")
        if len(quit_key) != 1:
            raise ValueError(f"quit_key must be a single character, got {quit_key!r}")

        self.focal_length = focal_length
        self.real_face_width = real_face_width
        self.output_video_path = output_video_path
        self.camera_index = camera_index
        self.speed_up_factor = speed_up_factor
        self.cascade_path = cascade_path
        self.faces_dir = faces_dir
        self.image_ext = image_ext
        self.video_fourcc = video_fourcc
        self.video_fps = video_fps
        self.video_size = tuple(video_size)
        self.window_name = window_name
        self.quit_key = quit_key
        self.key_poll_ms = key_poll_ms
        self.reset_saved_flags = reset_saved_flags
