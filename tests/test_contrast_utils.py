import logging

import pytest

from color_logic import hex_to_hsl, hsl_to_hex, hex_to_rgb, generate_color_ramp, rgb_to_hex
from contrast_utils import (relative_luminance, get_contrast_ratio, adjust_color_for_contrast,
                            assess_palette_contrast, auto_adjust_color, wcag_levels,
                            readable_text_color, darkest_shade_contrast, _descending, WHITE)

SAMPLE_HEXES = [rgb_to_hex(r, g, b)
                for r in range(0, 256, 85)
                for g in range(0, 256, 85)
                for b in range(0, 256, 85)]
SAMPLE_HEXES += ["#009EEC", "#1A5276", "#FF5733", "#C0FFEE", "#FFFF00", "#777777"]


def hue_distance(a, b):
    d = abs(a - b) % 360
    return min(d, 360 - d)


def test_relative_luminance_monotonic():
    # White > Gray > Black
    assert relative_luminance("#FFFFFF") > relative_luminance("#777777") > relative_luminance("#000000")


def test_relative_luminance_bounds():
    assert relative_luminance("#FFFFFF") == pytest.approx(1.0)
    assert relative_luminance("#000000") == 0


def test_contrast_ratio_black_white():
    assert get_contrast_ratio("#FFFFFF", "#000000") == pytest.approx(21.0)


def test_contrast_ratio_same_color():
    assert get_contrast_ratio("#009EEC", "#009EEC") == pytest.approx(1.0)


def test_contrast_ratio_symmetric():
    for a in SAMPLE_HEXES[::7]:
        for b in SAMPLE_HEXES[::5]:
            assert get_contrast_ratio(a, b) == get_contrast_ratio(b, a)


def test_contrast_ratio_bounds():
    for a in SAMPLE_HEXES:
        for b in ("#FFFFFF", "#000000", "#009EEC"):
            ratio = get_contrast_ratio(a, b)
            assert 1.0 - 1e-9 <= ratio <= 21.0 + 1e-9


def test_known_low_contrast_color():
    ratio = get_contrast_ratio("#009EEC", WHITE)
    assert ratio < 4.5
    assert ratio < 3.0


def test_wcag_levels():
    levels = wcag_levels(4.5)
    assert levels == {"AA": True, "AA Large": True, "AAA": False, "AAA Large": True}
    assert not any(wcag_levels(2.9).values())
    assert all(wcag_levels(21.0).values())


def test_descending():
    assert list(_descending(12, 5)) == [12, 7, 2, 0]
    assert list(_descending(10, 5)) == [10, 5, 0]
    assert list(_descending(0, 5)) == [0]
    assert list(_descending(2.5, 1)) == [2.5, 1.5, 0.5, 0]


def test_adjust_reaches_target_and_keeps_hue():
    result = adjust_color_for_contrast("#009EEC", 4.5)
    assert result != "#009EEC"
    assert get_contrast_ratio(result, WHITE) >= 4.5
    assert hue_distance(hex_to_hsl(result)[0], hex_to_hsl("#009EEC")[0]) < 2


def test_adjust_default_target_is_aa():
    assert adjust_color_for_contrast("#009EEC") == adjust_color_for_contrast("#009EEC", 4.5)


def test_adjust_returns_lightest_passing_step():
    h, s, l = hex_to_hsl("#009EEC")
    expected = None
    step = 0
    while l - step > 0:
        candidate = hsl_to_hex(h, s, l - step)
        if get_contrast_ratio(candidate, WHITE) >= 4.5:
            expected = candidate
            break
        step += 1
    assert expected is not None
    assert adjust_color_for_contrast("#009EEC", 4.5) == expected


@pytest.mark.parametrize("target", [3.0, 4.5, 7.0, 12.0])
def test_adjust_guarantee(target):
    for value in SAMPLE_HEXES:
        result = adjust_color_for_contrast(value, target)
        assert get_contrast_ratio(result, WHITE) >= target


def test_adjust_keeps_compliant_color():
    assert adjust_color_for_contrast("#000000", 4.5) == "#000000"
    assert adjust_color_for_contrast("#333333", 4.5) == "#333333"
    assert adjust_color_for_contrast("#1A5276", 4.5) == "#1A5276"


def test_adjust_achromatic_stays_gray():
    result = adjust_color_for_contrast("#FFFFFF", 4.5)
    r, g, b = hex_to_rgb(result)
    assert r == g == b
    assert get_contrast_ratio(result, WHITE) >= 4.5


def test_adjust_fallback_for_unreachable_target(caplog):
    h, s, l = hex_to_hsl("#009EEC")
    with caplog.at_level(logging.WARNING, logger="contrast_utils"):
        result = adjust_color_for_contrast("#009EEC", 25.0)
    assert result == hsl_to_hex(h, 50, 20)
    assert get_contrast_ratio(result, WHITE) < 25.0
    assert "falling back" in caplog.text


def test_darkest_shade_contrast():
    darkest = generate_color_ramp("#009EEC")[0]
    assert darkest_shade_contrast("#009EEC") == get_contrast_ratio(darkest.hex, WHITE)


def test_assess_low_contrast_base():
    issues = assess_palette_contrast("#009EEC")
    assert issues.has_issues
    assert issues.base_contrast == pytest.approx(get_contrast_ratio("#009EEC", WHITE))
    assert issues.base_contrast < 3.0
    assert issues.dark_shade_contrast >= 4.5


def test_assess_white_base():
    issues = assess_palette_contrast("#FFFFFF")
    assert issues.has_issues
    assert issues.base_contrast == pytest.approx(1.0)


def test_assess_no_issues():
    for value in ("#1A5276", "#000000"):
        assert not assess_palette_contrast(value).has_issues


def test_assess_custom_thresholds():
    assert assess_palette_contrast("#1A5276", base_min=10.0).has_issues


def test_auto_adjust_fixes_issues():
    adjusted = auto_adjust_color("#009EEC")
    assert adjusted != "#009EEC"
    assert get_contrast_ratio(adjusted, WHITE) >= 3.0
    assert darkest_shade_contrast(adjusted) >= 4.5
    assert not assess_palette_contrast(adjusted).has_issues


def test_auto_adjust_only_fixes_base_first():
    # base repair to 3:1 already gives a dark enough 120% shade
    assert auto_adjust_color("#009EEC") == adjust_color_for_contrast("#009EEC", 3.0)


def test_auto_adjust_keeps_good_color():
    assert auto_adjust_color("#1A5276") == "#1A5276"


def test_readable_text_color():
    assert readable_text_color((0, 0, 60)) == "#142433"
    assert readable_text_color((0, 0, 50)) == "#FFFFFF"
    assert readable_text_color((0, 0, 10)) == "#FFFFFF"
