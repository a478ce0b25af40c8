# rtcore/materials/texture_loader.py
import logging
import os

import numpy as np
from PIL import Image, UnidentifiedImageError

from rtcore.materials.textures import ImageTexture

logger = logging.getLogger(__name__)


def load_image(image_path: str) -> np.ndarray:
    """
    Decode an image file into an (height, width, 3) uint8 RGB array.

    Raises:
        FileNotFoundError: If the image file doesn't exist
        ValueError: If the file cannot be decoded as an image
    """
    if not os.path.exists(image_path):
        logger.error("Texture file not found: %s", image_path)
        raise FileNotFoundError(f"Texture file not found: {image_path}")

    try:
        with Image.open(image_path) as img:
            # Convert to RGB if necessary
            if img.mode != 'RGB':
                img = img.convert('RGB')
            return np.array(img, dtype=np.uint8)
    except (UnidentifiedImageError, OSError) as e:
        logger.error("Error loading texture %s: %s", image_path, e)
        raise ValueError(f"Error loading texture {image_path}: {e}") from e


def load_texture(image_path: str) -> ImageTexture:
    """
    Load an image file as a texture, with error handling and automatic format conversion.

    Args:
        image_path: Path to the image file

    Returns:
        ImageTexture object
    """
    return ImageTexture(load_image(image_path))


def create_image_material(image_path: str, material_class, **material_params):
    """
    Create a material with an image texture.

    Args:
        image_path: Path to the image file
        material_class: Material class to instantiate (e.g., Lambertian, Metal)
        **material_params: Additional parameters for the material (e.g., fuzz for Metal)

    Returns:
        Material instance with the image texture
    """
    texture = load_texture(image_path)
    return material_class(texture, **material_params)
