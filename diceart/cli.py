"""Interactive command that turns a picture into dice art."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from PIL import ImageOps

from .dicelib import IntensityPreset, add_reference_text, load_image
from .mosaic import build_mosaic, crop_to_square, fit_to_canvas, invert_dice, load_dice_images

OUTPUT_PATH = Path("output") / "dice_output.png"
DEFAULT_DICE_SIZE = 32
DEFAULT_WIDTH = 1920
DEFAULT_HEIGHT = 1080
_U32_MAX = 2**32 - 1


def parse_args(argv):
    parser = argparse.ArgumentParser(
        prog="diceart",
        description="Turns your images into dice art.",
    )
    parser.add_argument("--version", action="version", version="%(prog)s 1.0")
    parser.add_argument(
        "-i", "--input", required=True, metavar="INPUT_FILE",
        help="Path to the input image file",
    )
    parser.add_argument(
        "-d", "--dice-dir", required=True, metavar="DICE_DIRECTORY",
        help="Path to the directory containing dice images (exactly 6 images)",
    )
    return parser.parse_args(argv)


def _prompt(prompt, stdin, stdout):
    print(prompt, file=stdout)
    return stdin.readline().strip()


def ask_yes_no(prompt, stdin, stdout):
    """Ask a y/n question; only "y" (any case) counts as yes."""
    return _prompt(prompt, stdin, stdout).lower() == "y"


def ask_positive_int(prompt, default, stdin, stdout):
    """Ask for a positive whole number, falling back to the default on bad input."""
    answer = _prompt(prompt, stdin, stdout)
    digits = answer[1:] if answer.startswith("+") else answer
    if digits.isascii() and digits.isdigit():
        value = int(digits)
        if 0 < value <= _U32_MAX:
            return value
    print(f"Invalid value. Using default of {default}.", file=stdout)
    return default


def ask_preset(stdin, stdout):
    """Show the preset menu and return the chosen preset."""
    print("Pick your intensity preset:", file=stdout)
    for preset in IntensityPreset:
        print(f"{preset.value}. {preset.label}", file=stdout)
    try:
        return IntensityPreset.from_choice(stdin.readline())
    except ValueError:
        print("Invalid choice. Defaulting to Default preset.", file=stdout)
        return IntensityPreset.DEFAULT


def _ask_canvas(stdin, stdout):
    if not ask_yes_no("Do you want to set a custom output image size? (y/n):", stdin, stdout):
        return None
    width = ask_positive_int(
        "Enter the desired output image width (e.g., 1920 for desktop wallpaper):",
        DEFAULT_WIDTH, stdin, stdout,
    )
    height = ask_positive_int(
        "Enter the desired output image height (e.g., 1080 for desktop wallpaper):",
        DEFAULT_HEIGHT, stdin, stdout,
    )
    print(f"Custom output size set to {width}x{height}", file=stdout)
    return width, height


def main(argv=None):
    args = parse_args(argv)
    stdin, stdout = sys.stdin, sys.stdout

    try:
        image = load_image(args.input)
        size = ask_positive_int(
            "Enter the dice size you want (e.g., 32 for 32x32 pixels):",
            DEFAULT_DICE_SIZE, stdin, stdout,
        )
        dice = load_dice_images(args.dice_dir, size)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if ask_yes_no("Invert the input image? (y/n):", stdin, stdout):
        image = ImageOps.invert(image)
        print("Image inverted.", file=stdout)
    else:
        print("Keeping it original.", file=stdout)

    image = crop_to_square(image)

    if ask_yes_no("Invert the dice colors? (y/n):", stdin, stdout):
        dice = invert_dice(dice)
        print("Dice colors inverted.", file=stdout)
    else:
        print("Dice colors untouched.", file=stdout)

    canvas = _ask_canvas(stdin, stdout)
    if canvas is not None:
        image = fit_to_canvas(image, *canvas)

    preset = ask_preset(stdin, stdout)
    result = build_mosaic(image, dice, preset)

    if ask_yes_no("Do you want to add debug info to output image? (y/n):", stdin, stdout):
        add_reference_text(result.image, result.dice_size, result.total_dice, result.size)
        print("Debug info added to image", file=stdout)
    else:
        print("No debug info added.", file=stdout)

    OUTPUT_PATH.parent.mkdir(parents=True, exist_ok=True)
    try:
        result.image.save(OUTPUT_PATH)
    except (OSError, ValueError) as exc:
        print(f"Error saving output image: {exc}", file=sys.stderr)

    dw, dh = result.dice_size
    ow, oh = result.size
    print(f"Original image size: {image.width}x{image.height}", file=stdout)
    print(f"Dice size used: {dw}x{dh}", file=stdout)
    print(f"Total dice used: {result.total_dice}", file=stdout)
    print(f"Output image size: {ow}x{oh}", file=stdout)
    print(f"Output saved to {OUTPUT_PATH.as_posix()}", file=stdout)

    print("Press Enter to exit...", file=stdout)
    stdin.readline()
    return 0


if __name__ == "__main__":
    sys.exit(main())