#!/usr/bin/env python3
"""
Palette Bar

Maps a point on a palette bar to a color. Moving left to right the bar fades through
gray, brown and the rainbow of hues (red, yellow, green, cyan, blue, magenta). From the
center line moving up, colors lighten into white; moving down, they darken into black.
An optional border (margin) around the palette shows the selected color.

Usage: python palette_bar.py X Y [--width 700] [--height 200] [--margin 0] [--preview]
"""

import numpy as np
import argparse
import colorsys
import math
import matplotlib.pyplot as plt
from collections import namedtuple


DEFAULT_COLOR_MARGIN_DP = 4
DEFAULT_PALETTE_WIDTH = 700
DEFAULT_PALETTE_HEIGHT = 200

# Hue gradients from left to right, one equal-width segment each
HUE_GRADIENTS = (
    ("gray", "brown"),
    ("brown", "red"),
    ("red", "yellow"),
    ("yellow", "green"),
    ("green", "teal"),
    ("teal", "blue"),
    ("blue", "violet"),
)

# Tint gradients from top to bottom, one equal-height segment each
TINT_GRADIENTS = ("white", "black")

HUE_SEGMENTS = len(HUE_GRADIENTS)
TINT_SEGMENTS = len(TINT_GRADIENTS)

BLACK = (0, 0, 0)

PaletteGeometry = namedtuple("PaletteGeometry", ["width", "height", "margin"])


def validate_geometry(width, height):
    """Raise ValueError unless the palette has a positive width and height."""
    if width <= 0 or height <= 0:
        raise ValueError(f"Palette width and height must be positive, got {width}x{height}")


def _segment(position, count):
    """
    Split a position measured in segments into (index, mantissa).

    The index is clamped to [0, count - 1]; the mantissa is measured from the start of
    that segment, so positions beyond either end keep ramping along the edge segment.
    """
    index = min(max(math.floor(position), 0), count - 1)
    return index, position - index


def _clamp_channel(value):
    return int(min(255, max(0, value)))


def coords_to_color(x, y, width, height):
    """
    Get the color at a point on the palette.

    Args:
        x (float): Horizontal position, 0 is the left edge of the palette
        y (float): Vertical position, 0 is the top edge of the palette
        width (int): Width of the palette in pixels (excluding any margin)
        height (int): Height of the palette in pixels (excluding any margin)

    Returns:
        tuple: (r, g, b) with each channel in 0-255
    """
    validate_geometry(width, height)

    # Find the hue gradient we're in and how far through it we are
    gradient_idx, mantissa = _segment(x / (width / HUE_SEGMENTS), HUE_SEGMENTS)

    if gradient_idx == 0:  # gray to brown
        r = 127
        g = 127 - mantissa * 63
        b = 127 - mantissa * 127
    elif gradient_idx == 1:  # brown to red
        r = 127 + mantissa * 127
        g = 63 - mantissa * 63
        b = 0
    elif gradient_idx == 2:  # red to yellow
        r = 255
        g = mantissa * 255
        b = 0
    elif gradient_idx == 3:  # yellow to green
        r = 255 - mantissa * 255
        g = 255
        b = 0
    elif gradient_idx == 4:  # green to cyan
        r = 0
        g = 255
        b = mantissa * 255
    elif gradient_idx == 5:  # cyan to blue
        r = 0
        g = 255 - mantissa * 255
        b = 255
    else:  # blue to violet, open ended
        r = mantissa * 255
        g = 0
        b = 255

    # Same again vertically for the white and black tints
    gradient_idx, mantissa = _segment(y / (height / TINT_SEGMENTS), TINT_SEGMENTS)

    if gradient_idx == 0:
        whiteness = 255 - mantissa * 255
        r = min(255, r + whiteness)
        g = min(255, g + whiteness)
        b = min(255, b + whiteness)
    else:
        blackness = mantissa * 255
        r = max(r - blackness, 0)
        g = max(g - blackness, 0)
        b = max(b - blackness, 0)

    return _clamp_channel(r), _clamp_channel(g), _clamp_channel(b)


def coords_to_colors(xs, ys, width, height):
    """
    Vectorized coords_to_color for arrays of points.

    Args:
        xs (array-like): Horizontal positions
        ys (array-like): Vertical positions, broadcast against xs
        width (int): Width of the palette in pixels
        height (int): Height of the palette in pixels

    Returns:
        numpy.ndarray: uint8 array of shape broadcast(xs, ys).shape + (3,)
    """
    validate_geometry(width, height)

    xs, ys = np.broadcast_arrays(np.asarray(xs, dtype=np.float64),
                                 np.asarray(ys, dtype=np.float64))

    # Hue sector for every point
    position = xs / (width / HUE_SEGMENTS)
    h_sector = np.clip(np.floor(position), 0, HUE_SEGMENTS - 1).astype(int)
    mantissa = position - h_sector

    r_vals = np.zeros_like(mantissa)
    g_vals = np.zeros_like(mantissa)
    b_vals = np.zeros_like(mantissa)

    mask0 = h_sector == 0
    r_vals[mask0] = 127
    g_vals[mask0] = 127 - mantissa[mask0] * 63
    b_vals[mask0] = 127 - mantissa[mask0] * 127

    mask1 = h_sector == 1
    r_vals[mask1] = 127 + mantissa[mask1] * 127
    g_vals[mask1] = 63 - mantissa[mask1] * 63

    mask2 = h_sector == 2
    r_vals[mask2] = 255
    g_vals[mask2] = mantissa[mask2] * 255

    mask3 = h_sector == 3
    r_vals[mask3] = 255 - mantissa[mask3] * 255
    g_vals[mask3] = 255

    mask4 = h_sector == 4
    g_vals[mask4] = 255
    b_vals[mask4] = mantissa[mask4] * 255

    mask5 = h_sector == 5
    g_vals[mask5] = 255 - mantissa[mask5] * 255
    b_vals[mask5] = 255

    mask6 = h_sector == 6
    r_vals[mask6] = mantissa[mask6] * 255
    b_vals[mask6] = 255

    # Tint: whiteness in the top half, blackness below it
    position = ys / (height / TINT_SEGMENTS)
    t_sector = np.clip(np.floor(position), 0, TINT_SEGMENTS - 1).astype(int)
    mantissa = position - t_sector

    top = t_sector == 0
    bottom = ~top
    whiteness = 255 - mantissa[top] * 255
    blackness = mantissa[bottom] * 255

    for channel in (r_vals, g_vals, b_vals):
        channel[top] = np.minimum(255, channel[top] + whiteness)
        channel[bottom] = np.maximum(channel[bottom] - blackness, 0)

    colors = np.stack([r_vals, g_vals, b_vals], axis=-1)
    return np.clip(colors, 0, 255).astype(np.uint8)


def palette_grid(width, height):
    """
    Evaluate the palette at every pixel.

    Returns:
        numpy.ndarray: (height, width, 3) uint8 RGB array
    """
    y_coords, x_coords = np.mgrid[0:height, 0:width]
    return coords_to_colors(x_coords, y_coords, width, height)


def validate_density(density):
    """Raise ValueError unless the display density is positive."""
    if density <= 0:
        raise ValueError(f"Display density must be positive, got {density}")


def default_color_margin(density=1.0):
    """Default margin in pixels for a display density (pixels per dp)."""
    validate_density(density)
    return int(density * DEFAULT_COLOR_MARGIN_DP + .5)


def palette_geometry(view_width, view_height, margin=None, density=1.0):
    """
    Work out the palette area inside a view of the given size.

    Args:
        view_width (int): Width of the whole view in pixels, margin included
        view_height (int): Height of the whole view in pixels, margin included
        margin (int): Border around the palette in pixels. None or negative uses
            the default margin for the display density
        density (float): Display density used for the default margin

    Returns:
        PaletteGeometry: (width, height, margin) of the palette
    """
    validate_density(density)

    if margin is None or margin < 0:
        margin = default_color_margin(density)

    width = view_width - margin * 2
    height = view_height - margin * 2
    if width <= 0 or height <= 0:
        raise ValueError(
            f"A {margin}px margin leaves no palette inside a {view_width}x{view_height} view"
        )

    return PaletteGeometry(width, height, margin)


def clamp_to_palette(x, y, geometry):
    """
    Move view coordinates that fall in the margin onto the palette edge.

    Returns:
        tuple: (x, y) relative to the palette, (0, 0) being its top left corner
    """
    width, height, margin = geometry

    if x < margin:
        x = margin
    elif x >= width + margin:
        x = width + margin - 1

    if y < margin:
        y = margin
    elif y >= height + margin:
        y = height + margin - 1

    return x - margin, y - margin


def color_from_view_coords(x, y, geometry):
    """Get the color under a touch at view coordinates (x, y)."""
    palette_x, palette_y = clamp_to_palette(x, y, geometry)
    return coords_to_color(palette_x, palette_y, geometry.width, geometry.height)


def pack_argb(rgb, alpha=255):
    """Pack an (r, g, b) color into a 32-bit 0xAARRGGBB integer."""
    r, g, b = (int(c) for c in rgb)
    return (int(alpha) << 24) | (r << 16) | (g << 8) | b


def unpack_argb(color):
    """Split a 32-bit 0xAARRGGBB integer into (alpha, r, g, b)."""
    return (color >> 24) & 0xFF, (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def rgb_to_hex(rgb):
    r, g, b = (int(c) for c in rgb)
    return f"#{r:02X}{g:02X}{b:02X}"


def describe_color(rgb):
    """
    Summarize a color in the formats the CLI prints.

    Returns:
        dict: rgb tuple, hex string, packed argb int and hsv (degrees, 0-1, 0-1)
    """
    r, g, b = (int(c) for c in rgb)
    h, s, v = colorsys.rgb_to_hsv(r / 255.0, g / 255.0, b / 255.0)
    return {
        'rgb': (r, g, b),
        'hex': rgb_to_hex((r, g, b)),
        'argb': pack_argb((r, g, b)),
        'hsv': (h * 360, s, v),
    }


def palette_swatch(geometry, border_color=BLACK):
    """
    Build an RGB image of the whole view: the palette inside a border of the
    selected color.

    Returns:
        numpy.ndarray: (height + 2*margin, width + 2*margin, 3) uint8 RGB array
    """
    width, height, margin = geometry
    swatch = np.zeros((height + margin * 2, width + margin * 2, 3), dtype=np.uint8)
    swatch[:, :] = border_color
    swatch[margin:margin + height, margin:margin + width] = palette_grid(width, height)
    return swatch


def show_palette(geometry, selected=None, point=None):
    """
    Display the palette with matplotlib.

    Args:
        geometry (PaletteGeometry): Palette to draw
        selected (tuple): Color shown in the margin (default: black)
        point (tuple): View coordinates (x, y) to circle, usually the last touch
    """
    swatch = palette_swatch(geometry, selected if selected is not None else BLACK)
    width, height, margin = geometry

    plt.figure(figsize=(10, 10 * swatch.shape[0] / swatch.shape[1] + 1))
    plt.imshow(swatch)

    # One tick per hue gradient, centered on its segment
    segment_width = width / HUE_SEGMENTS
    tick_positions = [margin + (i + 0.5) * segment_width for i in range(HUE_SEGMENTS)]
    plt.xticks(tick_positions, [f"{start}→{end}" for start, end in HUE_GRADIENTS],
               rotation=30, fontsize=8)
    plt.yticks([margin + height / 4, margin + height * 3 / 4], list(TINT_GRADIENTS))

    if point is not None:
        plt.scatter([point[0]], [point[1]], s=120, facecolors='none', edgecolors='white',
                    linewidths=2)

    title = f"Palette {width}x{height} (margin {margin}px)"
    if selected is not None:
        title += f" - selected {rgb_to_hex(selected)}"
    plt.title(title)

    plt.tight_layout()
    plt.show()
    plt.close()


def main():
    """Main function to pick a color from the palette bar."""
    parser = argparse.ArgumentParser(
        description="Get the color at a point on a palette bar"
    )
    parser.add_argument("x", type=float, help="Horizontal touch position in view pixels")
    parser.add_argument("y", type=float, help="Vertical touch position in view pixels")
    parser.add_argument("--width", type=int, default=DEFAULT_PALETTE_WIDTH,
                       help=f"Width of the view in pixels (default: {DEFAULT_PALETTE_WIDTH})")
    parser.add_argument("--height", type=int, default=DEFAULT_PALETTE_HEIGHT,
                       help=f"Height of the view in pixels (default: {DEFAULT_PALETTE_HEIGHT})")
    parser.add_argument("--margin", type=int, default=0,
                       help="Border around the palette in pixels; negative uses the density default (default: 0)")
    parser.add_argument("--density", type=float, default=1.0,
                       help="Display density used for the default margin (default: 1.0)")
    parser.add_argument("--format", choices=["rgb", "hex", "argb", "all"], default="all",
                       help="Output format (default: all)")
    parser.add_argument("--preview", action="store_true",
                       help="Also show the palette with the touched point circled")

    args = parser.parse_args()

    try:
        geometry = palette_geometry(args.width, args.height, args.margin, args.density)
        rgb = color_from_view_coords(args.x, args.y, geometry)
        info = describe_color(rgb)

        if args.format == "rgb":
            print(f"{rgb[0]},{rgb[1]},{rgb[2]}")
        elif args.format == "hex":
            print(info['hex'])
        elif args.format == "argb":
            print(f"0x{info['argb']:08X}")
        else:
            h, s, v = info['hsv']
            print(f"Palette: {geometry.width}x{geometry.height} (margin {geometry.margin}px)")
            print(f"RGB:  {rgb}")
            print(f"Hex:  {info['hex']}")
            print(f"ARGB: 0x{info['argb']:08X}")
            print(f"HSV:  ({h:.1f}°, {s:.2f}, {v:.2f})")

        if args.preview:
            print("Showing palette preview...")
            show_palette(geometry, rgb, (args.x, args.y))

    except Exception as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    exit(main())
