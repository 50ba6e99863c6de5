import colorsys
import math
import re
from collections import namedtuple

HEX_PATTERN = re.compile(r"#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})")
RGB_HEX_PATTERN = re.compile(r"#?([A-Fa-f0-9]{2})([A-Fa-f0-9]{2})([A-Fa-f0-9]{2})")

# Darkest first. Consumers rely on this order.
RAMP_PERCENTAGES = [120, 110, 100, 90, 80, 70, 60, 50, 40, 30, 20, 10]

Shade = namedtuple("Shade", ["percentage", "hex", "hsl"])


def round_half_up(value):
    # round() is banker's rounding; channels need .5 -> up
    return int(math.floor(value + 0.5))


def is_valid_hex(hex_str):
    if not isinstance(hex_str, str):
        return False
    return HEX_PATTERN.fullmatch(hex_str) is not None


def normalize_hex(hex_str):
    """
    '#f73' -> '#FF7733'. Does not validate; call is_valid_hex first.
    """
    hex_str = hex_str.replace('#', '', 1)
    if len(hex_str) == 3:
        hex_str = ''.join([c*2 for c in hex_str])
    return '#' + hex_str.upper()


def hex_to_rgb(hex_str):
    """
    Convert '#RRGGBB' to (r, g, b). Malformed input gives (0, 0, 0).
    """
    match = RGB_HEX_PATTERN.fullmatch(hex_str) if isinstance(hex_str, str) else None
    if not match:
        return 0, 0, 0
    return tuple(int(part, 16) for part in match.groups())


def rgb_to_hex(r, g, b):
    return f"#{round_half_up(r):02X}{round_half_up(g):02X}{round_half_up(b):02X}"


def rgb_to_hsl(r, g, b):
    """
    Convert RGB (0-255) to HSL (degrees, percent, percent).
    """
    h, l, s = colorsys.rgb_to_hls(r/255.0, g/255.0, b/255.0)
    return h * 360.0, s * 100.0, l * 100.0


def hsl_to_rgb(h, s, l):
    """
    Convert HSL (degrees, percent, percent) to RGB (0-255).
    """
    r, g, b = colorsys.hls_to_rgb((h / 360.0) % 1.0, l / 100.0, s / 100.0)
    # Clamp values to 0-255 in case of out of range lightness
    r = max(0, min(255, round_half_up(r * 255)))
    g = max(0, min(255, round_half_up(g * 255)))
    b = max(0, min(255, round_half_up(b * 255)))
    return r, g, b


def hex_to_hsl(hex_str):
    return rgb_to_hsl(*hex_to_rgb(hex_str))


def hsl_to_hex(h, s, l):
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


def ramp_lightness(base_l, percentage):
    """
    Lightness for one ramp step.
    100 keeps the base, 110/120 darken by up to 80% of the base lightness,
    90 down to 10 move linearly towards white.
    """
    if percentage == 100:
        return base_l
    if percentage > 100:
        factor = (percentage - 100) / 20.0
        return max(0.0, base_l - base_l * factor * 0.8)
    factor = (100 - percentage) / 90.0
    return min(100.0, base_l + (100.0 - base_l) * factor)


def generate_color_ramp(base_hex):
    h, s, l = hex_to_hsl(base_hex)

    shades = []
    for percentage in RAMP_PERCENTAGES:
        shade_hex = hsl_to_hex(h, s, ramp_lightness(l, percentage))
        # HSL is re-read from the hex so it matches what gets displayed
        shades.append(Shade(percentage, shade_hex, hex_to_hsl(shade_hex)))
    return shades


def rgb_to_hsl_string(r, g, b):
    h, s, l = rgb_to_hsl(r, g, b)
    return f"hsl({round_half_up(h)}, {round_half_up(s)}%, {round_half_up(l)}%)"
