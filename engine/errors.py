class FaceDetectorError(RuntimeError):
    """Base class for fatal pipeline errors."""


class CameraOpenError(FaceDetectorError):
    pass


class CascadeLoadError(FaceDetectorError):
    pass


class WriterOpenError(FaceDetectorError):
    pass


class FrameReadError(FaceDetectorError):
    pass
