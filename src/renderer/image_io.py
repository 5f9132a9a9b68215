# renderer/image_io.py
import logging
import os

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

def save_image(frame: np.ndarray, path: str) -> None:
    """
    Write a rendered frame to disk. The format follows the file extension.

    Args:
        frame: (height, width, 3) uint8 RGB array, top row first.
        path: Destination file.

    Raises:
        ValueError: If the frame is not an RGB uint8 array or the extension is
            not a format Pillow can write.
        OSError: If the file cannot be written.
    """
    frame = np.asarray(frame)
    if frame.ndim != 3 or frame.shape[2] != 3 or frame.dtype != np.uint8:
        raise ValueError(f"Expected a (height, width, 3) uint8 frame, got {frame.shape} {frame.dtype}")

    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    Image.fromarray(frame, "RGB").save(path)
    logger.info("Wrote %dx%d image to %s", frame.shape[1], frame.shape[0], path)

def load_image(path: str) -> np.ndarray:
    """Read an image back as a (height, width, 3) uint8 array."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Image file not found: {path}")
    with Image.open(path) as img:
        if img.mode != 'RGB':
            img = img.convert('RGB')
        return np.array(img, dtype=np.uint8)
