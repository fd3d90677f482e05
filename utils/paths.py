import os
import time

from utils.config import FACE_IMAGE_EXT


def unique_face_path(output_dir, ext=FACE_IMAGE_EXT, timestamp=None):
    """
    Returns a face image path that does not exist yet.

    Name is face_<unix-timestamp><ext>; when taken, a counter suffix
    (_1, _2, ...) is appended. No locking: single process only.
    """
    os.makedirs(output_dir, exist_ok=True)

    if timestamp is None:
        timestamp = int(time.time())

    base = f"face_{timestamp}"
    path = os.path.join(output_dir, base + ext)

    count = 1
    while os.path.exists(path):
        path = os.path.join(output_dir, f"{base}_{count}{ext}")
        count += 1

    return path
