import logging
from collections import namedtuple

from color_logic import hex_to_rgb, hex_to_hsl, hsl_to_hex, generate_color_ramp

logger = logging.getLogger(__name__)

WHITE = "#FFFFFF"

# WCAG 2.1 thresholds
AA_NORMAL = 4.5
AA_LARGE = 3.0
AAA_NORMAL = 7.0
AAA_LARGE = 4.5

LIGHTNESS_STEP = 1
SATURATION_STEP = 5

# Used when no (saturation, lightness) pair reaches the target
FALLBACK_SATURATION = 50
FALLBACK_LIGHTNESS = 20

ContrastIssues = namedtuple("ContrastIssues", ["base_contrast", "dark_shade_contrast", "has_issues"])


def calculate_luminance(r, g, b):
    """
    Calculates relative luminance using WCAG 2.0 formula.
    """
    components = []
    for c in [r, g, b]:
        v = c / 255.0
        if v <= 0.03928:
            components.append(v / 12.92)
        else:
            components.append(((v + 0.055) / 1.055) ** 2.4)

    r_lin, g_lin, b_lin = components
    return (0.2126 * r_lin) + (0.7152 * g_lin) + (0.0722 * b_lin)


def relative_luminance(hex_str):
    return calculate_luminance(*hex_to_rgb(hex_str))


def get_contrast_ratio(color_a, color_b):
    """
    Returns contrast ratio (float) between two hex colors.
    Order of the arguments does not matter.
    """
    l1 = relative_luminance(color_a)
    l2 = relative_luminance(color_b)
    brightest = max(l1, l2)
    darkest = min(l1, l2)
    return (brightest + 0.05) / (darkest + 0.05)


def wcag_levels(ratio):
    return {
        "AA": ratio >= AA_NORMAL,
        "AA Large": ratio >= AA_LARGE,
        "AAA": ratio >= AAA_NORMAL,
        "AAA Large": ratio >= AAA_LARGE,
    }


def _descending(start, step):
    """
    start, start - step, ... while positive, then 0.
    """
    value = start
    while value > 0:
        yield value
        value -= step
    yield 0


def adjust_color_for_contrast(hex_str, target_ratio=4.5):
    """
    Finds a color with the same hue that reaches target_ratio against white.

    Lightness is scanned downwards one point at a time from the original
    lightness. If no lightness works, saturation is lowered in steps of 5 and
    the lightness scan repeated. The first hit is returned, so the result is
    the lightest passing color at the highest passing saturation.

    If nothing in the grid passes, hsl(h, 50, 20) is returned and the target
    is NOT guaranteed; callers needing certainty should re-check the ratio.
    """
    h, s, l = hex_to_hsl(hex_str)

    # l=0 is black (21:1), so lower saturations only matter for targets above 21
    for test_s in _descending(s, SATURATION_STEP):
        for test_l in _descending(l, LIGHTNESS_STEP):
            test_hex = hsl_to_hex(h, test_s, test_l)
            if get_contrast_ratio(test_hex, WHITE) >= target_ratio:
                logger.debug("Adjusted %s -> %s (s=%.1f, l=%.1f) for %.2f:1",
                             hex_str, test_hex, test_s, test_l, target_ratio)
                return test_hex

    fallback = hsl_to_hex(h, FALLBACK_SATURATION, FALLBACK_LIGHTNESS)
    logger.warning("No variant of %s reaches %.2f:1 against white, falling back to %s",
                   hex_str, target_ratio, fallback)
    return fallback


def darkest_shade_contrast(hex_str):
    # Ramp is ordered darkest first
    darkest = generate_color_ramp(hex_str)[0]
    return get_contrast_ratio(darkest.hex, WHITE)


def assess_palette_contrast(hex_str, base_min=AA_LARGE, dark_min=AA_NORMAL):
    """
    Checks a base color before building its palette.

    The base color itself should reach base_min against white (large text and
    UI elements), and the darkest (120%) shade should reach dark_min (body text).
    """
    base_contrast = get_contrast_ratio(hex_str, WHITE)
    dark_contrast = darkest_shade_contrast(hex_str)
    has_issues = base_contrast < base_min or dark_contrast < dark_min
    return ContrastIssues(base_contrast, dark_contrast, has_issues)


def auto_adjust_color(hex_str, base_min=AA_LARGE, dark_min=AA_NORMAL):
    """
    Repairs a base color so that both checks of assess_palette_contrast pass.
    The base is fixed first; the darkest shade is only checked afterwards.
    """
    adjusted = hex_str

    if get_contrast_ratio(adjusted, WHITE) < base_min:
        adjusted = adjust_color_for_contrast(adjusted, base_min)

    if darkest_shade_contrast(adjusted) < dark_min:
        adjusted = adjust_color_for_contrast(adjusted, dark_min)

    logger.info("Auto-adjusted %s -> %s", hex_str, adjusted)
    return adjusted


def readable_text_color(hsl):
    """
    Label color for text drawn on top of a swatch.
    """
    return "#142433" if hsl[2] > 50 else "#FFFFFF"
