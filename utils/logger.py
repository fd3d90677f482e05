import sys
import threading
from datetime import datetime

class AppLogger:
    def __init__(self):
        self.lock = threading.Lock()

    def _emit(self, message: str, stream):
        timestamp = datetime.now().strftime("%H:%M:%S")
        line = f"[{timestamp}] {message}"

        with self.lock:
            print(line, file=stream)

    def log(self, message: str):
        self._emit(message, sys.stdout)

    def error(self, message: str):
        self._emit(message, sys.stderr)
