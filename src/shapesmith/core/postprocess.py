"""Affine post-processing of generated images.

Rotation and scaling operate on finished buffers with Pillow and never
touch the path engine. Like the generators, they return None instead of a
partial result when the input is unusable.
"""

import math

from PIL import Image

from shapesmith.domain import PixelBuffer


def rotate(buffer: PixelBuffer, angle: float) -> PixelBuffer | None:
    """Rotate an image around its center.

    The canvas grows to the bounding box of the rotated image; uncovered
    corners are transparent.

    Args:
        buffer: Image to rotate
        angle: Rotation in radians, positive is clockwise on screen

    Returns:
        Rotated image, or None if the angle is not finite
    """
    if not math.isfinite(angle):
        return None

    # Pillow rotates counter-clockwise for positive degrees. Rounding drops
    # float noise so quarter turns hit Pillow's exact transpose path.
    degrees = round(-math.degrees(angle), 9)
    rotated = buffer.image.rotate(
        degrees,
        resample=Image.Resampling.BICUBIC,
        expand=True,
    )
    return PixelBuffer(image=rotated, scale=buffer.scale)


def scale(buffer: PixelBuffer, factor: float) -> PixelBuffer | None:
    """Resize an image by a factor.

    Args:
        buffer: Image to resize
        factor: Multiplier for both pixel dimensions

    Returns:
        Resized image, or None if the factor is not positive or the
        result would have a zero side
    """
    if not math.isfinite(factor) or factor <= 0:
        return None

    width = round(buffer.width * factor)
    height = round(buffer.height * factor)
    if width < 1 or height < 1:
        return None

    resized = buffer.image.resize((width, height), resample=Image.Resampling.LANCZOS)
    return PixelBuffer(image=resized, scale=buffer.scale)


def crop_center(buffer: PixelBuffer, width: int, height: int) -> PixelBuffer:
    """Cut a centered width x height region out of an image.

    Useful after rotate(), whose output is larger than its input.
    """
    left = (buffer.width - width) // 2
    top = (buffer.height - height) // 2
    cropped = buffer.image.crop((left, top, left + width, top + height))
    return PixelBuffer(image=cropped, scale=buffer.scale)
