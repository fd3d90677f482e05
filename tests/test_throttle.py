import pytest

from engine.throttle import FrameThrottle
from utils.config import DetectorConfig


@pytest.mark.parametrize("factor", [1, 2, 3, 5])
def test_one_frame_in_every_factor_frames_passes(factor):
    throttle = FrameThrottle(factor)
    passed = [throttle.should_process() for _ in range(60)]

    assert sum(passed) == 60 // factor
    # The last frame of each group of `factor` is the processed one
    assert [i for i, p in enumerate(passed) if p] == list(range(factor - 1, 60, factor))


def test_counter_resets_after_processed_frame():
    throttle = FrameThrottle(3)
    throttle.should_process()
    throttle.should_process()
    assert throttle.counter == 2

    assert throttle.should_process() is True
    assert throttle.counter == 0


def test_factor_one_processes_every_frame():
    throttle = FrameThrottle(1)
    assert all(throttle.should_process() for _ in range(10))


@pytest.mark.parametrize("factor", [0, -1, -5, 1.5, "2", True])
def test_invalid_factor_is_a_configuration_error(factor):
    with pytest.raises(ValueError):
        FrameThrottle(factor)


def test_config_rejects_bad_values():
    with pytest.raises(ValueError):
        DetectorConfig(speed_up_factor=0)
    with pytest.raises(ValueError):
        DetectorConfig(focal_length=0)
    with pytest.raises(ValueError):
        DetectorConfig(video_fourcc="MJPEG")


def test_config_defaults():
    config = DetectorConfig()

    assert config.focal_length == 800
    assert config.real_face_width == 14.0
    assert config.camera_index == 0
    assert config.speed_up_factor == 2
    assert config.video_size == (640, 480)
    assert config.video_fps == 30
    assert config.video_fourcc == "MJPG"
    assert config.reset_saved_flags is False


@pytest.mark.parametrize("factor", [0, -3, 2.0])
def test_config_and_throttle_reject_the_same_factors(factor):
    with pytest.raises(ValueError) as from_config:
        DetectorConfig(speed_up_factor=factor)
    with pytest.raises(ValueError) as from_throttle:
        FrameThrottle(factor)

    assert str(from_config.value) == str(from_throttle.value)
