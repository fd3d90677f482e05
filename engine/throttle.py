def check_speed_up_factor(speed_up_factor):
    if isinstance(speed_up_factor, bool) or not isinstance(speed_up_factor, int):
        raise ValueError(f"speed_up_factor must be an int, got {speed_up_factor!r}")
    if speed_up_factor < 1:
        raise ValueError(f"speed_up_factor must be >= 1, got {speed_up_factor}")

    return speed_up_factor


class FrameThrottle:
    """
    Lets one frame in every `speed_up_factor` captured frames through.

    speed_up_factor=1 processes every frame, 2 every other frame, etc.
    """

    def __init__(self, speed_up_factor=1):
        check_speed_up_factor(speed_up_factor)

        self.skip_count = speed_up_factor - 1
        self.counter = 0

    def should_process(self):
        self.counter += 1

        if self.counter % (self.skip_count + 1) != 0:
            return False

        self.counter = 0
        return True
