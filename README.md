# gmtimer

This package has two small tools:

- **gray2mono** turns an 8-bit grayscale BMP into a black-and-white image.
  It compares each pixel with the mean of a square window around that pixel.
- **Timers.** `ManualTimer` and `AutoTimer` measure how long a piece of code
  takes to run. They report the time to the terminal or to a log file.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To install the test tools as well, use `pip install .[test]`.

## Binarizing an image

```
gray2mono input.bmp output.bmp -t=128 -w=5
```

The command takes exactly four arguments: the input path, the output path and
two options. You can give the options in either order:

- If the first option contains `-t`, it is the threshold and the second option
  is the window size.
- Otherwise the first option is the window size and the second is the
  threshold.

Each option is written as `name=value`:

- The value must be present.
- A leading integer is read from the value. If the value does not start with a
  number, it counts as 0.

The values must meet these rules:

- The threshold must be between 0 and 255.
- The window size must be a positive odd number.
- The window size must not be larger than the image width or the image height.

On success the command prints the window size and the threshold, then a
completion message, and exits with status 0.

On an error it prints a message and exits with status 1. Errors include:

- a wrong number of arguments, which prints the usage line
- a file that cannot be read
- a BMP that is not 8 bits per pixel
- a threshold or window size that is out of range

### How a pixel is chosen

For each pixel, the tool takes the integer mean of the pixels in its window.
Only pixels that lie inside the image count toward the mean. If the mean is
greater than the threshold, the pixel becomes 255. Otherwise it becomes 0.

Row padding bytes are set to 0.

The output file has:

- the input's file header and info header, unchanged
- a linear gray palette, in which entry *i* is (*i*, *i*, *i*)

### From Python

```python
from gmtimer.binarize import binarize, convert, parse_options, read_gray_bmp, write_mono_bmp

threshold, window = parse_options("-t=128", "-w=5")   # (128, 5)
result = convert("input.bmp", "output.bmp", threshold, window)
```

These functions make up the Python interface:

- **`read_gray_bmp(path)`** returns a `GrayImage`. A `GrayImage` has these
  parts:
  - the headers, `file_header` and `info_header`
  - `palette`, a list of `RgbQuad`
  - `pixels`, padded rows that run bottom-up
  - the properties `width`, `height` and `row_size`
- **`binarize(data, width, height, threshold, window_size)`** works on raw
  padded pixel rows and returns a new `bytearray`.
- **`write_mono_bmp(path, image)`** writes an image with the linear gray
  palette.
- **`convert(...)`** reads, binarizes and writes in one step, and returns the
  binarized `GrayImage`.

The module `gmtimer.bmp` holds the packed header structures:

- `FileHeader`, 14 bytes
- `InfoHeader`, 40 bytes
- `RgbQuad`, 4 bytes

Each of them has `from_bytes` and `to_bytes`. When data is too short or cannot
be encoded, they raise `BmpError`. The reading and writing functions raise
`BmpError` for file problems and `ValueError` for bad parameters.

### Limits

- Only 8-bit, uncompressed BMPs are read.
- The 256-entry palette must follow the info header directly.
- The pixel rows must follow the palette directly.
- Other bit depths and compressed images are rejected or not understood.

## Timing code

```python
from gmtimer.timer import ManualTimer, AutoTimer

timer = ManualTimer("load", mode="std")
timer.start()
...  # work
timer.end()
timer.report()

with AutoTimer("compute", mode="log", dst="logs/timer.log"):
    ...  # work
```

Both timers take the following arguments, in this order:

- `label`, default `"timer"`
- `mode`, default `"std"`
- `fmt`, default `"[{time}] ({label}) {duration} seconds."`
- `dst`, default `"none"`
- `precision`, default `6`

They also take two keyword-only arguments:

- `stream`, where `std` mode writes. The default is standard output.
- `clock`, a function that returns nanoseconds. The default is
  `time.perf_counter_ns`.

Timer methods:

- `duration_us()` returns the whole microseconds between `start()` and `end()`.
- `report()` writes the report and returns the line it wrote. It returns `None`
  when the mode is neither `"std"` nor `"log"`.

How each timer behaves in a `with` block:

- A `ManualTimer` used in a `with` block reports when the block ends. You call
  `start()` and `end()` yourself.
- An `AutoTimer` starts when it is created and again when the block is
  entered. It stops and reports when the block ends.

### Modes

- **`"std"`** prints the report to the stream in bold green, using ANSI escape
  codes, after a blank line.
- **`"log"`** appends the report to `dst`. When `dst` is `"none"`, it appends
  to `./timer.log` instead. Missing parent directories are created.
- **Any other mode** reports nothing.

### Report format

| Placeholder    | Replaced by                                              |
|----------------|----------------------------------------------------------|
| `{time}`       | local time, `YYYY-MM-DD HH:MM:SS`                        |
| `{label}`      | the timer's label                                        |
| `{duration}`   | elapsed seconds with `precision` decimals (6 if negative) |
| `{commitID}`   | output of `git rev-parse HEAD`, trailing newlines removed |
| `{commitID-s}` | the first 7 characters of the commit id                  |

How the commit id is found depends on the mode:

- In `std` mode, git is always asked for the commit id. If git is not
  available, the id is empty.
- In `log` mode, git is asked only when the format contains `{commitID}`.
  Otherwise the id is `NOCOMMITID`.

The functions behind this live in `gmtimer.output`:

- `timestamp_now`
- `exec_command`
- `git_commit_id`
- `replace_keywords`
- `std_output`
- `log_output`

The colour helpers live in `gmtimer.color`:

- `set_green`
- `reset`

## Demo

```
gmtimer-demo [--points N] [--count N] [--seed N]
```

The demo runs two timed steps, each with its own `ManualTimer`:

1. It prints `--count` numbered random integers. The default is 10000.
2. It estimates pi from `--points` random points. The default is 10,000,000.

An `AutoTimer` reports the whole run, including the short commit id.

`gmtimer.demo.estimate_pi(total_points, rng=None)` is also available from
Python.