#!/usr/bin/env python3
# Render the successive-pair lattice (v[i], v[i+1]) of the minstd sequence to a PNG using Pillow.
# Every LCG puts its pairs on a small number of lines; this makes that visible.

import argparse, os
from PIL import Image, ImageDraw

from minstd.config import RUN
from minstd.rng import M
from minstd.sequence import generate

BG = (0, 0, 0, 255)
DOT = (0, 220, 0, 255)

def successive_pairs(values):
    return list(zip(values, values[1:]))

def to_pixel(v, size):
    # Map [0, M) onto [0, size)
    return (v * size) // M

def render_pairs(out_png, count=2000, size=512):
    if count < 2:
        raise SystemExit("count must be at least 2 to form a pair.")
    values = [v for _, v in generate(RUN.seed, count)]
    canvas = Image.new("RGBA", (size, size), BG)
    draw = ImageDraw.Draw(canvas)
    for x, y in successive_pairs(values):
        # y grows downward in image space
        draw.point((to_pixel(x, size), size - 1 - to_pixel(y, size)), fill=DOT)
    out_dir = os.path.dirname(out_png)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    canvas.save(out_png)
    return canvas

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--count", type=int, default=2000, help="Number of values to draw")
    ap.add_argument("--size", type=int, default=512, help="Image width/height in pixels")
    ap.add_argument("--out", type=str, default=os.path.join("out", "png", "pairs.png"), help="PNG path")
    args = ap.parse_args()
    render_pairs(args.out, count=args.count, size=args.size)
    print(f"Wrote {args.out}")

if __name__ == "__main__":
    main()
