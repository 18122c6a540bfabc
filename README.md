# visionbasics

Plain, readable implementations of classic image-processing operations on
NumPy arrays. Each routine is short enough to read in one sitting; the
package suits learning how these operations work and small jobs where a
full vision library would be too much.

Images are NumPy arrays of `uint8`. Colour images have the shape
`(height, width, 3)` with channels in BGR order; grayscale images have the
shape `(height, width)`. Every function returns a new array and leaves its
input untouched.

## Installation

```
pip install visionbasics
```

Python 3.10 or later is needed. The package depends on NumPy, and on
Pillow for reading and writing image files.

## Modules

### `visionbasics.bmp` — 8-bit BMP files

- `parse_bmp(data)` parses the bytes of an 8-bit BMP file into a `BmpImage`
  holding a `BitmapFileHeader` (`header`), a `BitmapInfoHeader` (`info`) and
  `width * height` bytes of pixel data (`data`). The pixel data is taken to
  follow the info header directly; if the file ends early the missing pixels
  are zero.
- `read_bmp(path)` reads a file and parses it.
- `BmpImage.pixels()` returns the pixels as a `(height, width)` array with
  the top row first.
- `format_headers(image)` returns both headers as printable text.

`BmpError` (a `ValueError`) is raised when the data is too short for the
headers, does not start with `BM`, is not 8 bits per pixel, or has negative
dimensions.

```python
from visionbasics.bmp import read_bmp, format_headers

bitmap = read_bmp("picture.bmp")
print(format_headers(bitmap))
pixels = bitmap.pixels()
```

### `visionbasics.interpolation` — resizing

- `bilinear_interpolate(image, width, height)`
- `nearest_neighbour_interpolate(image, width, height)`

Both accept grayscale or multi-channel images and map the corners of the
output onto the corners of the input. `width` and `height` must each be at
least 2. Bilinear results are truncated to integers.

### `visionbasics.convolution` — naive convolution

- `convolve(image, kernel)` applies a 2-D kernel to every channel. The image
  is padded by one replicated pixel on each side and the kernel's top-left
  element sits one pixel up and left of the output pixel, so a 3×3 kernel is
  centred. The kernel is not flipped. Sums are rounded (halves to even) and
  clipped to 0..255.
- `separable_convolve(image, vertical, horizontal)` convolves with a column
  kernel and then a row kernel, saturating the intermediate image to 8 bits.

### `visionbasics.morphology` — binary morphology

Square kernels of ones on grayscale images; `kernel_size` must be odd and
at least 3, otherwise `ValueError` is raised.

- `kernel_sum(image, row, col, kernel_size)` sums the window around a pixel,
  leaving out positions outside the image.
- `erosion(image, kernel_size)` gives 255 only where the whole window is 255.
  Positions outside the image count as 0, so a pixel whose window reaches
  past the edge always becomes 0.
- `dilation(image, kernel_size)` gives 255 wherever any pixel in the window
  is non-zero.
- `opening` (erode, then dilate), `closing` (dilate, then erode) and
  `gradient` (dilation minus erosion).
- `difference(first, second)` is the absolute per-pixel difference of two
  equally sized images.

### `visionbasics.blob` — colour sampling

- `median(values)` returns the median, averaging the two middle values for
  an even count, and 0.0 for no values.
- `median_pixel_values(image)` returns the median of each of three channels.
- `hsv_bounds(hue, saturation, value)` truncates its inputs to integers and
  returns `(lower, upper)` bounds: hue ±5, saturation and value ±50 kept
  within 0..255.

### `visionbasics.pixels` — direct pixel work

- `black_out_rows(image)` sets every even-numbered row of a colour image to
  black.
- `change_blue(image)` sets the blue channel of even-numbered rows to 255.
- `draw_lines(height=480, width=720)` draws white horizontal, vertical and
  45-degree lines on a black canvas.
- `crop(image, rows, cols)` copies the top-left `rows × cols` region.
- `translate(image, tx, ty)` shifts the image so that output pixel `(r, c)`
  is input pixel `(r + ty, c + tx)`; shifts are truncated to whole pixels and
  uncovered pixels are black.
- `mask_colours(image, colours=(GREY, WHITE))` sets pixels of the given
  colours to black.

## Example

```python
import numpy as np

from visionbasics.interpolation import bilinear_interpolate, nearest_neighbour_interpolate
from visionbasics.convolution import convolve, separable_convolve
from visionbasics.morphology import erosion, gradient
from visionbasics.blob import median_pixel_values, hsv_bounds

image = np.zeros((50, 50, 3), dtype=np.uint8)

bigger = bilinear_interpolate(image, 200, 200)      # width, height
smaller = nearest_neighbour_interpolate(image, 20, 20)

sobel = np.array([[-1, 0, 1], [-2, 0, 2], [-1, 0, 1]], dtype=float)
edges = convolve(image, sobel)
blurred = separable_convolve(image, [0.25, 0.5, 0.25], [0.25, 0.5, 0.25])

mask = np.zeros((50, 50), dtype=np.uint8)
mask[10:40, 10:40] = 255
eroded = erosion(mask, 3)
outline = gradient(mask, 3)

lower, upper = hsv_bounds(*median_pixel_values(image))
```

## Command line

`visionbasics-bmp` prints the headers of an 8-bit BMP file, and with a
second argument also saves its pixels as an image:

```
visionbasics-bmp picture.bmp
visionbasics-bmp picture.bmp picture.png
```

`visionbasics` runs one operation on an image file and saves the result;
the output file's suffix picks its format:

```
visionbasics interpolate input.jpg up.jpg down.jpg [--up-size W H] [--down-size W H]
visionbasics convolve input.jpg edges.png [--scale 0.5]
visionbasics separable input.jpg blurred.png [--intermediate FILE] [--full FILE] [--scale 0.5]
visionbasics erode input.png output.png [--kernel-size 3]
visionbasics dilate input.png output.png
visionbasics open input.png output.png
visionbasics close input.png output.png
visionbasics gradient input.png output.png
```

`interpolate` defaults to 1000×1000 for the bilinear output and 100×100 for
the nearest-neighbour output. `convolve` applies a Sobel kernel and
`separable` a 3×3 Gaussian as two one-dimensional passes, both after scaling
the input by `--scale`. The morphology commands read the input as grayscale.
Both commands return 1 and print a message when a file cannot be read or an
argument is invalid.

## What it does not do

The package works on arrays and files only. It opens no windows to show
images and reads no camera or video; `visionbasics.blob` computes the colour
statistics and bounds used for tracking a blob, but does not track one.

## Running the tests

```
pip install "visionbasics[test]"
pytest
```