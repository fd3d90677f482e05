from engine.functions import crop_face
from utils.config import FACE_IMAGE_EXT
from utils.paths import unique_face_path
from utils.video_io import save_image


class FaceRecorder:
    def __init__(
        self,
        faces_dir,
        image_ext=FACE_IMAGE_EXT,
        reset_saved_flags=False,
        logger=None,
    ):
        self.faces_dir = faces_dir
        self.image_ext = image_ext
        self.reset_saved_flags = reset_saved_flags
        self.log = logger or (lambda *_: None)

        # One flag per current detection index
        self.saved = []

    def sync(self, count):
        if self.reset_saved_flags:
            self.saved = [False] * count
        elif len(self.saved) != count:
            # Resize only: flags of surviving indices are kept
            self.saved = self.saved[:count] + [False] * (count - len(self.saved))

    def record(self, frame, faces):
        """
        Save a crop for every face index not flagged yet.

        Pass the frame before any overlay is drawn: crops are cut from
        it as-is, so saved faces carry no box or labels.

        Returns:
            List of written image paths.
        """
        self.sync(len(faces))

        written = []
        for i, face in enumerate(faces):
            if self.saved[i]:
                continue

            crop = crop_face(frame, face)
            if crop.size == 0:
                continue

            path = save_image(
                unique_face_path(self.faces_dir, ext=self.image_ext),
                crop,
            )
            self.saved[i] = True
            written.append(path)
            self.log(f"💾 Face {i + 1} saved: {path}")

        return written
