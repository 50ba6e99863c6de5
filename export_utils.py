import os
import json
import logging

from PIL import Image

from color_logic import hex_to_rgb

logger = logging.getLogger(__name__)


def shade_to_dict(shade):
    h, s, l = shade.hsl
    return {
        "percentage": shade.percentage,
        "hex": shade.hex,
        "hsl": {"h": h, "s": s, "l": l},
    }


def ramp_to_dicts(shades):
    return [shade_to_dict(shade) for shade in shades]


def palette_to_json(shades):
    return json.dumps(ramp_to_dicts(shades), indent=2)


def export_filename(base_hex, ext="json"):
    return f"palette-{base_hex.replace('#', '').upper()}.{ext}"


def write_palette_json(shades, path):
    """
    Write the palette as JSON. OSError propagates to the caller.
    """
    with open(path, 'w', encoding='utf-8') as f:
        f.write(palette_to_json(shades))
    logger.info("Exported %d shades to %s", len(shades), path)
    return path


def render_ramp_image(shades, swatch_size=64):
    """
    One square per shade, left to right in ramp order.
    """
    width = max(1, swatch_size * len(shades))
    image = Image.new("RGB", (width, swatch_size), (0, 0, 0))
    for i, shade in enumerate(shades):
        box = (i * swatch_size, 0, (i + 1) * swatch_size, swatch_size)
        image.paste(hex_to_rgb(shade.hex), box)
    return image


def write_palette_png(shades, path, swatch_size=64):
    image = render_ramp_image(shades, swatch_size)
    image.save(path, format="PNG")
    logger.info("Rendered %d shades to %s", len(shades), path)
    return path


def default_export_path(base_hex, ext="json", export_dir=""):
    return os.path.join(export_dir or os.getcwd(), export_filename(base_hex, ext))
