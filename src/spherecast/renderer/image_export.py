# renderer/image_export.py
import numpy as np
from PIL import Image

from spherecast.renderer.ppm import read_ppm

def save_png(image: np.ndarray, output_path: str):
    """
    Saves a (height, width, 3) uint8 array as a PNG.
    """
    Image.fromarray(np.ascontiguousarray(image, dtype=np.uint8)).save(output_path, format="PNG")

def convert_ppm_to_png(ppm_path: str, png_path: str) -> np.ndarray:
    """
    Reads an ASCII PPM file and writes a PNG copy of it.

    Returns:
        The decoded image array
    """
    image = read_ppm(ppm_path)
    save_png(image, png_path)
    return image
