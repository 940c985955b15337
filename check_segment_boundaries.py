#!/usr/bin/env python3
"""
Diagnostic script to check that colors don't jump where hue gradients meet
"""

import sys

from palette_bar import HUE_GRADIENTS, HUE_SEGMENTS, coords_to_color, rgb_to_hex


def check_segment_boundaries(width=700, height=200, y=None, tolerance=2):
    """
    Compare the colors just either side of every hue segment boundary on one row.

    Args:
        width (int): Palette width in pixels
        height (int): Palette height in pixels
        y (float): Row to check (default: the center line, where no tint is applied)
        tolerance (int): Largest per-channel difference that counts as continuous

    Returns:
        list: One dict per boundary whose jump exceeds the tolerance
    """
    if y is None:
        y = height / 2

    segment_width = width / HUE_SEGMENTS
    delta = segment_width * 1e-3

    print(f"Checking {HUE_SEGMENTS - 1} hue boundaries at y={y} ({width}x{height} palette)")

    jumps = []
    for i in range(1, HUE_SEGMENTS):
        boundary_x = i * segment_width
        left = coords_to_color(boundary_x - delta, y, width, height)
        right = coords_to_color(boundary_x + delta, y, width, height)
        jump = max(abs(a - b) for a, b in zip(left, right))

        _, left_name = HUE_GRADIENTS[i - 1]
        mark = "✓" if jump <= tolerance else "✗"
        print(f"{mark} {left_name:>6} at x={boundary_x:7.1f}: {rgb_to_hex(left)} | {rgb_to_hex(right)} (jump {jump})")

        if jump > tolerance:
            jumps.append({
                'boundary': i,
                'x': boundary_x,
                'left': left,
                'right': right,
                'jump': jump,
            })

    print(f"\nSummary: {len(jumps)} boundaries exceed a jump of {tolerance}")
    return jumps


if __name__ == "__main__":
    if len(sys.argv) not in (1, 3):
        print("Usage: python check_segment_boundaries.py [width height]")
        sys.exit(1)

    if len(sys.argv) == 3:
        jumps = check_segment_boundaries(int(sys.argv[1]), int(sys.argv[2]))
    else:
        jumps = check_segment_boundaries()

    sys.exit(1 if jumps else 0)
