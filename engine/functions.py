import os
import cv2

from engine.errors import CascadeLoadError
from utils.config import (
    SCALE_FACTOR,
    MIN_NEIGHBORS,
    MIN_FACE_SIZE,
    BOX_COLOR,
    BOX_THICKNESS,
    TEXT_COLOR,
    TEXT_SCALE,
    TEXT_THICKNESS,
    SUMMARY_POSITION,
)

###################################################################
# 1. Face Detection (Haar cascade)
###################################################################

def load_face_cascade(cascade_path):
    if not os.path.isfile(cascade_path):
        raise CascadeLoadError(f"Face cascade not found: {cascade_path}")

    print("🔧 Loading face cascade...")
    cascade = cv2.CascadeClassifier()
    try:
        loaded = cascade.load(cascade_path)
    except cv2.error as e:
        raise CascadeLoadError(f"Cannot load face cascade: {cascade_path}") from e

    if not loaded or cascade.empty():
        raise CascadeLoadError(f"Cannot load face cascade: {cascade_path}")
    print("✅ Face cascade loaded")

    return cascade


def detect_faces(
    cascade,
    gray,
    scale_factor: float = SCALE_FACTOR,
    min_neighbors: int = MIN_NEIGHBORS,
    min_size=MIN_FACE_SIZE,
):
    """
    Runs multi-scale detection on a grayscale frame.

    Returns:
        List of (x, y, w, h) int tuples, in detector order.
    """
    rects = cascade.detectMultiScale(
        gray,
        scaleFactor=scale_factor,
        minNeighbors=min_neighbors,
        minSize=tuple(min_size),
    )

    return [tuple(int(v) for v in r) for r in rects]

###################################################################
# 2. Distance estimation (pinhole camera)
###################################################################

def estimate_distance(real_face_width, focal_length, face_width_px):
    if face_width_px <= 0:
        raise ValueError(f"Face width must be positive, got {face_width_px}")

    return (real_face_width * focal_length) / face_width_px

###################################################################
# 3. Labels
###################################################################

def face_label(index, distance):
    return f"Face {index + 1} Dist: {distance:.2f} cm"


def face_count_label(count):
    return f"{count} face{'' if count == 1 else 's'} found"

###################################################################
# 4. Drawing
###################################################################

def crop_face(frame, face):
    """Crop clipped to the frame bounds (copy, not a view)."""
    x, y, w, h = face
    fh, fw = frame.shape[:2]
    x1, y1 = max(0, x), max(0, y)
    x2, y2 = min(fw, x + w), min(fh, y + h)

    return frame[y1:y2, x1:x2].copy()


def draw_on_frame(frame, faces, distances):
    """
    Draw all overlays on the frame (modified in-place).

    Draws:
      - One box per face
      - "Face i Dist: d cm" at each box's top-left corner
      - "N face(s) found" summary
    """

    # ----------------------------
    # Faces
    # ----------------------------
    for i, ((x, y, w, h), distance) in enumerate(zip(faces, distances)):
        cv2.rectangle(frame, (x, y), (x + w, y + h), BOX_COLOR, BOX_THICKNESS)
        cv2.putText(
            frame,
            face_label(i, distance),
            (x, y),
            cv2.FONT_HERSHEY_DUPLEX,
            TEXT_SCALE,
            TEXT_COLOR,
            TEXT_THICKNESS,
        )

    # ----------------------------
    # Summary label
    # ----------------------------
    cv2.putText(
        frame,
        face_count_label(len(faces)),
        SUMMARY_POSITION,
        cv2.FONT_HERSHEY_DUPLEX,
        TEXT_SCALE,
        TEXT_COLOR,
        TEXT_THICKNESS,
    )
