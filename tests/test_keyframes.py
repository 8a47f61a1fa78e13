import pytest

import config
from keyframes import Keyframe, get_interpolated_frames
from mandelbrot import InvalidConfigurationError


def test_interpolate_halfway():
    start = Keyframe(x_center=-0.75, y_center=0.0, x_size=3.5, y_size=3.5, index=0)
    end = Keyframe(x_center=-1.35, y_center=0.2, x_size=0.2, y_size=0.4, index=100)

    middle = start.interpolate(end, 50)

    assert middle.index == 50
    assert middle.x_center == pytest.approx(-1.05)
    assert middle.y_center == pytest.approx(0.1)
    assert middle.x_size == pytest.approx(1.85)
    assert middle.y_size == pytest.approx(1.95)


def test_interpolate_endpoints():
    start = Keyframe(0.0, 0.0, 2.0, 2.0, 10)
    end = Keyframe(1.0, -1.0, 1.0, 0.5, 20)

    assert start.interpolate(end, 10) == start
    assert start.interpolate(end, 20) == end


def test_configured_zoom_frames():
    frames = get_interpolated_frames(config.KEYFRAMES)

    # the last keyframe only closes the animation
    assert len(frames) == 300
    assert [frame.index for frame in frames] == list(range(300))
    assert frames[0] == config.KEYFRAMES[0]
    assert frames[100] == config.KEYFRAMES[1]
    assert frames[-1].x_size == pytest.approx(3.5 - 3.3 / 200)


def test_too_few_keyframes_give_no_frames():
    assert get_interpolated_frames([]) == []
    assert get_interpolated_frames([Keyframe(0.0, 0.0, 1.0, 1.0, 0)]) == []


def test_keyframe_indices_must_increase():
    keyframes = [Keyframe(0.0, 0.0, 1.0, 1.0, 5), Keyframe(0.0, 0.0, 1.0, 1.0, 5)]
    with pytest.raises(InvalidConfigurationError):
        get_interpolated_frames(keyframes)


@pytest.mark.parametrize("x_size, y_size", [(0.0, 1.0), (1.0, -1.0)])
def test_keyframe_size_must_be_positive(x_size, y_size):
    with pytest.raises(InvalidConfigurationError):
        Keyframe(0.0, 0.0, x_size, y_size, 0)


def test_keyframe_index_must_not_be_negative():
    with pytest.raises(InvalidConfigurationError):
        Keyframe(0.0, 0.0, 1.0, 1.0, -1)


def test_viewport():
    keyframe = Keyframe(x_center=-0.5, y_center=0.25, x_size=3.0, y_size=2.0, index=0)
    assert keyframe.viewport() == (-2.0, 1.0, -0.75, 1.25)


def test_get_coordinate_starts_at_top_left():
    # 8x4 pixels of size 0.5 over (-2, 2) x (-1, 1)
    keyframe = Keyframe(x_center=0.0, y_center=0.0, x_size=4.0, y_size=2.0, index=0)

    assert keyframe.get_coordinate(0, 3, 8, 4) == (-2.0, -1.0)
    assert keyframe.get_coordinate(0, 0, 8, 4) == (-2.0, 0.5)
    assert keyframe.get_coordinate(4, 1, 8, 4) == (0.0, 0.0)
    assert keyframe.get_coordinate(7, 0, 8, 4) == (1.5, 0.5)
