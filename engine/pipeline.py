import time
import cv2

from engine.processor import FaceDetector


class Pipeline:
    def __init__(self, config, logger=None):
        self.config = config
        self.log = logger or (lambda *_: None)
        self.quit_code = ord(config.quit_key)

    # -------------------------------------------------------
    def run(self):
        """
        Runs the capture loop until the quit key is pressed.
        Errors propagate; camera, writer and windows are released first.

        Returns:
            dict with the session counters.
        """
        self.log("🚀 Starting face detection")
        self.log(f"📁 Faces directory: {self.config.faces_dir}")
        self.log(f"🎞 Output video: {self.config.output_video_path}")
        self.log(f"⌨ Press '{self.config.quit_key}' to quit")
        self.log("-" * 60)

        start = time.time()
        detector = FaceDetector(self.config, logger=self.log)

        try:
            while True:
                if detector.process_frame():
                    detector.display_frame(self.config.window_name)

                if cv2.waitKey(self.config.key_poll_ms) & 0xFF == self.quit_code:
                    self.log("🛑 Quit key pressed")
                    break
        finally:
            detector.release()

        # ---------------------------------------------------
        # Session summary
        # ---------------------------------------------------
        elapsed = time.time() - start
        summary = {
            "frames_captured": detector.frames_captured,
            "frames_processed": detector.frames_processed,
            "faces_saved": detector.faces_saved,
            "elapsed": elapsed,
        }

        self.log("-" * 60)
        self.log("🏁 Session completed")
        self.log(
            f"🎬 Frames: {summary['frames_processed']}/{summary['frames_captured']} processed | "
            f"💾 Faces saved: {summary['faces_saved']}"
        )
        self.log(f"⏱ Total time: {elapsed:.2f}s")

        return summary
