# emojify/compositor.py
import logging
import math
from typing import Tuple

from PIL import Image

from emojify.models import FaceSignals

logger = logging.getLogger(__name__)

EMOJI_SCALE_FACTOR = 0.8


def emoji_size(emoji: Image.Image, face: FaceSignals) -> Tuple[int, int]:
    """Target (width, height) of the emoji for this face.

    The scale factor is applied to the width and then again to the
    aspect-derived height, so emojis come out flatter than the source art.
    """
    new_width = int(face.bounding_box.width * EMOJI_SCALE_FACTOR)
    new_height = int((emoji.height * new_width // emoji.width) * EMOJI_SCALE_FACTOR)
    return new_width, new_height


def emoji_position(size: Tuple[int, int], face: FaceSignals) -> Tuple[int, int]:
    """Top-left corner: centred horizontally, a third of the emoji above centre vertically."""
    width, height = size
    box = face.bounding_box
    x = box.center_x - width // 2
    y = box.center_y - height // 3
    return math.floor(x), math.floor(y)


def overlay(base: Image.Image, emoji: Image.Image, face: FaceSignals) -> Image.Image:
    """Draw ``emoji`` over ``face`` on a copy of ``base``; ``base`` is left untouched."""
    # Palette and other indexed modes carry colours outside the pixel data.
    if base.mode not in ("RGB", "RGBA", "L"):
        has_alpha = "A" in base.getbands() or "transparency" in base.info
        base = base.convert("RGBA" if has_alpha else "RGB")

    result = Image.new(base.mode, base.size)
    result.paste(base, (0, 0))

    size = emoji_size(emoji, face)
    if size[0] <= 0 or size[1] <= 0:
        logger.debug("overlay: emoji size %s too small, skipping face", size)
        return result

    scaled = emoji.convert("RGBA").resize(size, Image.Resampling.NEAREST)
    position = emoji_position(size, face)

    result.paste(scaled.convert(result.mode), position, scaled.getchannel("A"))
    return result
