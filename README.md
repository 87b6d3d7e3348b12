# diceart

diceart turns a picture into a mosaic of dice. It converts the input image to
grayscale and splits it into a grid of blocks, each the size of one die. The
average brightness of a block picks a die face from one to six. The picture of
that face is then drawn in the block's place in the output.

## Installation

```
pip install .
```

To also install the test requirements:

```
pip install .[test]
```

## Usage

You need two things: an input image, and a directory that holds exactly six
files, which are the pictures of the dice faces. Subdirectories are ignored.
The files are sorted by path, so the first file is face one, the second is
face two, and so on. Names such as `1.png` … `6.png` work well for this.

```
diceart --input photo.jpg --dice-dir dice/
```

You can also use the short options `-i` and `-d`. `diceart --version` prints
the version.

The command asks these questions on the terminal, in this order:

1. **Dice size** in pixels. For example, `32` gives dice of 32x32 pixels. If
   the answer is empty, not a number or not positive, the size is 32. Each face
   picture is resized to this size.
2. **Invert the input image?** Answer `y` or `n`. Only `y` counts as yes, in
   either case, and every other answer counts as no.
3. **Invert the dice colours?** The colour channels of each face are inverted
   and the transparency stays as it was.
4. **Set a custom output size?** If you answer yes, the command asks for a
   width and then a height. If an answer is not valid, 1920 or 1080 is used in
   its place. The image is scaled to fit a black canvas of that size, keeps its
   aspect ratio, and sits in the centre of the canvas.
5. **Intensity preset**, chosen from a menu:
   1. Default
   2. High Contrast
   3. Low Contrast
   4. Bright
   5. Dark

   Any other answer selects Default.
6. **Add debug info?** If you answer yes, a white caption on a black strip is
   drawn at the top-left of the result. It reads
   `Dice size: WxH, Total dice: N, Image size: WxH`, and the image size it
   gives is the size of the output. The caption uses `DejaVuSans-Bold.ttf`
   when that font can be found, and Pillow's default font when it cannot.

The input image is cropped to a square from its top-left corner straight after
step 2. The number of whole dice that fit across and down sets the size of the
output, and any leftover pixels at the right and bottom edges are dropped.

The result is always written to `output/dice_output.png` in the current
directory. The `output` directory is created if it does not exist. After that
the command prints a summary: the size of the processed input, the dice size,
the number of dice used and the output size. It then waits for Enter before it
exits.

If the input image or the dice directory cannot be read, the command prints
the error on standard error and exits with status 1. The same happens when
the directory does not hold exactly six files.

## Presets

Each preset splits the brightness range 0–255 into six bands, one for each
face:

| Preset        | 1    | 2      | 3       | 4       | 5       | 6       |
|---------------|------|--------|---------|---------|---------|---------|
| Default       | 0–50 | 51–100 | 101–150 | 151–200 | 201–230 | 231–255 |
| High Contrast | 0–42 | 43–85  | 86–128  | 129–171 | 172–214 | 215–255 |
| Low Contrast  | 0–60 | 61–120 | 121–180 | 181–210 | 211–240 | 241–255 |
| Bright        | 0–30 | 31–80  | 81–130  | 131–180 | 181–220 | 221–255 |
| Dark          | 0–70 | 71–120 | 121–160 | 161–200 | 201–240 | 241–255 |

## Using it from Python

`diceart.dicelib` provides the following:

- `DiceSide`: the six faces, `ONE` to `SIX`.
- `IntensityPreset`: the five presets. `IntensityPreset.from_choice("2")`
  returns the preset for a menu number and raises `ValueError` for any other
  answer.
- `Dice`: pairs a side with its picture.
- `map_intensity_to_dice_side(avg_intensity, preset)`: gives the face for a
  brightness. It raises `ValueError` when the value is outside 0–255.
- `load_image(path)`: opens an image as 8-bit grayscale.
- `add_reference_text(image, dice_size, total_dice, full_image_size)`: draws
  the caption in place and returns its text.

`diceart.mosaic` provides the following:

- `load_dice_images(dice_dir, size)`: loads six faces as RGBA pictures of
  `size` x `size`. It raises `ValueError` when there are not exactly six
  files or the size is not positive.
- `invert_dice(dice)`: returns new dice with their colours inverted.
- `crop_to_square(image)`: keeps the top-left square of the image.
- `fit_to_canvas(image, width, height)`: scales and centres the image on a
  black grayscale canvas.
- `build_mosaic(image, dice, preset)`: returns a `MosaicResult` with the
  fields `image`, `dice_size`, `columns`, `rows`, `total_dice` and `size`. If
  no picture is given for a face that is needed, it issues a warning and
  leaves that block transparent.

```python
from diceart.dicelib import IntensityPreset, load_image
from diceart.mosaic import build_mosaic, crop_to_square, load_dice_images

image = crop_to_square(load_image("photo.jpg"))
dice = load_dice_images("dice/", 32)
result = build_mosaic(image, dice, IntensityPreset.DEFAULT)
result.image.save("mosaic.png")
print(result.columns, result.rows, result.total_dice)
```

## Limitations

- The command is interactive only. The dice size, the inversions, the canvas
  and the preset are asked on the terminal and cannot be given as options.
- The output path `output/dice_output.png` is fixed.
- Images that are not square always lose part of the picture, because only
  the top-left square is used.