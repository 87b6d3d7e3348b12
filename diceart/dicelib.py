"""Dice faces, intensity presets and basic image helpers."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

FONT_NAME = "DejaVuSans-Bold.ttf"
FONT_SIZE = 20
TEXT_CHAR_WIDTH = 12
TEXT_BOX_HEIGHT = 24
TEXT_OFFSET = (5, 5)


class DiceSide(Enum):
    """The six faces of a die, ordered from darkest to brightest."""

    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6


class IntensityPreset(Enum):
    """Ways of splitting the 0-255 intensity range among the six faces."""

    DEFAULT = "1"
    HIGH_CONTRAST = "2"
    LOW_CONTRAST = "3"
    BRIGHT = "4"
    DARK = "5"

    @classmethod
    def from_choice(cls, choice):
        """Return the preset for a menu choice such as ``"2"``; raise ValueError otherwise."""
        return cls(str(choice).strip())

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()

    @property
    def upper_bounds(self) -> tuple[int, ...]:
        """Highest intensity mapped to each of the faces one to five."""
        return _UPPER_BOUNDS[self]


_UPPER_BOUNDS = {
    IntensityPreset.DEFAULT: (50, 100, 150, 200, 230),
    IntensityPreset.HIGH_CONTRAST: (42, 85, 128, 171, 214),
    IntensityPreset.LOW_CONTRAST: (60, 120, 180, 210, 240),
    IntensityPreset.BRIGHT: (30, 80, 130, 180, 220),
    IntensityPreset.DARK: (70, 120, 160, 200, 240),
}


@dataclass
class Dice:
    """A die face together with the picture used to draw it."""

    side: DiceSide
    image: Image.Image


def map_intensity_to_dice_side(avg_intensity, preset):
    """Pick the face for an average intensity between 0 and 255."""
    if not 0 <= avg_intensity <= 255:
        raise ValueError(f"intensity out of range 0-255: {avg_intensity}")
    return DiceSide(bisect_left(preset.upper_bounds, avg_intensity) + 1)


def load_image(input_path):
    """Open an image file and return it as 8-bit grayscale."""
    with Image.open(Path(input_path)) as img:
        return img.convert("L")


def _load_font():
    try:
        return ImageFont.truetype(FONT_NAME, FONT_SIZE)
    except OSError:
        try:
            return ImageFont.load_default(size=FONT_SIZE)
        except TypeError:
            return ImageFont.load_default()


def add_reference_text(image, dice_size, total_dice, full_image_size):
    """Draw a white-on-black caption with the mosaic's figures in the top-left corner.

    The image is changed in place; the caption text is returned.
    """
    text = (
        f"Dice size: {dice_size[0]}x{dice_size[1]}, Total dice: {total_dice}, "
        f"Image size: {full_image_size[0]}x{full_image_size[1]}"
    )
    draw = ImageDraw.Draw(image)
    box_width = len(text) * TEXT_CHAR_WIDTH
    draw.rectangle((0, 0, box_width - 1, TEXT_BOX_HEIGHT - 1), fill=(0, 0, 0, 255))
    draw.text(TEXT_OFFSET, text, fill=(255, 255, 255, 255), font=_load_font())
    return text