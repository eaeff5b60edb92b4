import pytest

from jpegtune.color_transform import (
    CB_TO_BLUE_TABLE,
    CB_TO_GREEN_TABLE,
    CR_TO_GREEN_TABLE,
    CR_TO_RED_TABLE,
    range_limit,
    ycbcr_to_rgb,
)


def test_tables_match_fixed_endpoints():
    assert CR_TO_RED_TABLE[0] == -179
    assert CR_TO_RED_TABLE[255] == 178
    assert CB_TO_BLUE_TABLE[0] == -227
    assert CB_TO_BLUE_TABLE[255] == 225
    assert CR_TO_GREEN_TABLE[0] == 5990656
    assert CR_TO_GREEN_TABLE[255] == -5943854
    assert CB_TO_GREEN_TABLE[0] == 2919680
    assert CB_TO_GREEN_TABLE[255] == -2831590
    assert ycbcr_to_rgb(200, 128, 0)[0] == 21
    assert ycbcr_to_rgb(50, 128, 255)[0] == 228
    assert ycbcr_to_rgb(255, 0, 128)[2] == 28
    assert ycbcr_to_rgb(20, 255, 128)[2] == 245


def test_tables_have_256_entries_and_zero_at_center():
    for table in (CR_TO_RED_TABLE, CB_TO_BLUE_TABLE, CR_TO_GREEN_TABLE):
        assert len(table) == 256
        assert table[128] == 0
    assert CB_TO_GREEN_TABLE[128] == 32768
    assert ycbcr_to_rgb(100, 128, 0)[1] == 191
    assert ycbcr_to_rgb(128, 128, 255)[1] == 37
    assert ycbcr_to_rgb(100, 0, 128)[1] == 144
    assert ycbcr_to_rgb(100, 255, 128)[1] == 56
    assert range_limit(128 + CR_TO_RED_TABLE[255]) == 255


def test_range_limit_clamps_within_table():
    assert range_limit(-384) == 0
    assert range_limit(-1) == 0
    assert range_limit(0) == 0
    assert range_limit(100) == 100
    assert range_limit(255) == 255
    assert range_limit(639) == 255


@pytest.mark.parametrize("value", [-385, 640, 10000])
def test_range_limit_rejects_values_outside_table(value):
    with pytest.raises(ValueError):
        range_limit(value)


@pytest.mark.parametrize("y", [0, 1, 64, 128, 200, 255])
def test_neutral_chroma_gives_gray(y):
    assert ycbcr_to_rgb(y, 128, 128) == (y, y, y)


def test_outputs_stay_in_byte_range():
    for y in range(0, 256, 17):
        for cb in range(0, 256, 15):
            for cr in range(0, 256, 15):
                for channel in ycbcr_to_rgb(y, cb, cr):
                    assert 0 <= channel <= 255


def test_extreme_chroma_saturates():
    assert ycbcr_to_rgb(0, 0, 0)[0] == 0
    assert ycbcr_to_rgb(255, 255, 255)[0] == 255
    assert ycbcr_to_rgb(255, 255, 255)[2] == 255
    assert ycbcr_to_rgb(0, 0, 0)[2] == 0


def test_red_grows_and_green_shrinks_with_cr():
    previous = ycbcr_to_rgb(128, 128, 0)
    for cr in range(1, 256):
        current = ycbcr_to_rgb(128, 128, cr)
        assert current[0] >= previous[0]
        assert current[1] <= previous[1]
        assert current[2] == previous[2]
        previous = current


def test_blue_grows_with_cb():
    previous = ycbcr_to_rgb(128, 0, 128)
    for cb in range(1, 256):
        current = ycbcr_to_rgb(128, cb, 128)
        assert current[2] >= previous[2]
        assert current[0] == previous[0]
        previous = current


def test_close_to_floating_point_conversion():
    for y in range(0, 256, 31):
        for cb in range(0, 256, 29):
            for cr in range(0, 256, 29):
                r, g, b = ycbcr_to_rgb(y, cb, cr)
                fr = y + 1.402 * (cr - 128)
                fg = y - 0.34414 * (cb - 128) - 0.71414 * (cr - 128)
                fb = y + 1.772 * (cb - 128)
                assert abs(r - min(max(fr, 0), 255)) <= 1
                assert abs(g - min(max(fg, 0), 255)) <= 1
                assert abs(b - min(max(fb, 0), 255)) <= 1


@pytest.mark.parametrize("pixel", [(-1, 128, 128), (128, 256, 128),
                                   (128, 128, -5), (300, 0, 0)])
def test_rejects_out_of_range_samples(pixel):
    with pytest.raises(ValueError):
        ycbcr_to_rgb(*pixel)