# renderer/ppm.py
import numpy as np

MAGIC = "P3"
MAX_VALUE = 255

def format_header(width: int, height: int) -> str:
    return f"{MAGIC}\n{width} {height}\n{MAX_VALUE}\n"

def format_pixel(r: int, g: int, b: int) -> str:
    return f"{r} {g} {b}\n"

def write_ppm(path: str, image: np.ndarray):
    """
    Writes a (height, width, 3) uint8 array as an ASCII P3 file, one pixel per line.
    Overwrites any existing file; I/O errors propagate.
    """
    height, width = image.shape[0], image.shape[1]
    with open(path, "w", newline="\n") as f:
        f.write(format_header(width, height))
        for row in image:
            f.write("".join(format_pixel(int(r), int(g), int(b)) for r, g, b in row))

def read_ppm(path: str) -> np.ndarray:
    """
    Parses an ASCII P3 file into a (height, width, 3) uint8 array.

    Raises:
        ValueError: If the file is not a P3 image or the pixel count is wrong
    """
    with open(path, "r") as f:
        tokens = f.read().split()

    if len(tokens) < 4 or tokens[0] != MAGIC:
        raise ValueError(f"Not an ASCII PPM (P3) file: {path}")

    width, height, max_value = int(tokens[1]), int(tokens[2]), int(tokens[3])
    if max_value != MAX_VALUE:
        raise ValueError(f"Unsupported max channel value {max_value} in {path}")

    values = np.array(tokens[4:], dtype=np.int64)
    if values.size != width * height * 3:
        raise ValueError(
            f"Expected {width * height * 3} channel values in {path}, found {values.size}"
        )
    return values.astype(np.uint8).reshape(height, width, 3)
