"""Turning a grayscale picture into a grid of dice faces."""

from __future__ import annotations

import warnings
from dataclasses import dataclass, replace
from pathlib import Path

from PIL import Image, ImageOps

from .dicelib import Dice, DiceSide, map_intensity_to_dice_side

DICE_COUNT = 6


@dataclass
class MosaicResult:
    """The finished mosaic and the grid it was built on."""

    image: Image.Image
    dice_size: tuple[int, int]
    columns: int
    rows: int

    @property
    def total_dice(self) -> int:
        return self.columns * self.rows

    @property
    def size(self) -> tuple[int, int]:
        return self.image.size


def load_dice_images(dice_dir, size):
    """Load exactly six face images from a directory, sorted by path, resized to size x size."""
    if size <= 0:
        raise ValueError(f"dice size must be positive, got {size}")
    paths = sorted(p for p in Path(dice_dir).iterdir() if p.is_file())
    if len(paths) != DICE_COUNT:
        raise ValueError(
            f"expected exactly {DICE_COUNT} dice images in {dice_dir}, found {len(paths)}"
        )
    dice = []
    for side, path in zip(DiceSide, paths):
        with Image.open(path) as img:
            resized = img.convert("RGBA").resize((size, size), Image.Resampling.LANCZOS)
        dice.append(Dice(side, resized))
    return dice


def _invert_colours(image):
    r, g, b, a = image.convert("RGBA").split()
    return Image.merge(
        "RGBA", (ImageOps.invert(r), ImageOps.invert(g), ImageOps.invert(b), a)
    )


def invert_dice(dice):
    """Return the dice with their colours inverted and their alpha kept."""
    return [replace(d, image=_invert_colours(d.image)) for d in dice]


def crop_to_square(image):
    """Keep the top-left square of the image."""
    side = min(image.size)
    return image.crop((0, 0, side, side))


def fit_to_canvas(image, width, height):
    """Scale the image to fit a black width x height canvas, keeping its aspect ratio, centred."""
    if width <= 0 or height <= 0:
        raise ValueError(f"canvas size must be positive, got {width}x{height}")
    in_w, in_h = image.size
    if in_w == 0 or in_h == 0:
        raise ValueError("cannot fit an empty image")
    aspect = in_w / in_h
    if width / height > aspect:
        new_w, new_h = int(height * aspect + 0.5), height
    else:
        new_w, new_h = width, int(width / aspect + 0.5)
    canvas = Image.new("L", (width, height), 0)
    if new_w > 0 and new_h > 0:
        scaled = image.convert("L").resize((new_w, new_h), Image.Resampling.LANCZOS)
        canvas.paste(scaled, ((width - new_w) // 2, (height - new_h) // 2))
    return canvas


def build_mosaic(image, dice, preset):
    """Replace each dice-sized block of the image by the face matching its average intensity."""
    if not dice:
        raise ValueError("no dice images given")
    dw, dh = dice[0].image.size
    if dw == 0 or dh == 0:
        raise ValueError("dice images are empty")
    gray = image.convert("L")
    columns, rows = gray.width // dw, gray.height // dh
    output = Image.new("RGBA", (columns * dw, rows * dh), (0, 0, 0, 0))
    faces = {}
    for d in dice:
        faces.setdefault(d.side, d.image.convert("RGBA"))
    pixels_per_block = dw * dh
    for row in range(rows):
        for col in range(columns):
            x, y = col * dw, row * dh
            block = gray.crop((x, y, x + dw, y + dh))
            average = sum(block.tobytes()) // pixels_per_block
            side = map_intensity_to_dice_side(average, preset)
            face = faces.get(side)
            if face is None:
                warnings.warn(
                    f"could not find dice for side {side.name} at grid ({col}, {row})",
                    stacklevel=2,
                )
                continue
            output.alpha_composite(face, dest=(x, y))
    return MosaicResult(output, (dw, dh), columns, rows)