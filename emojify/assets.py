# emojify/assets.py
import logging
import os
from typing import Dict, List, Optional

from PIL import Image, ImageDraw

from emojify.models import EmojiCategory

logger = logging.getLogger(__name__)

ASSET_NAMES: Dict[EmojiCategory, str] = {
    EmojiCategory.SMILE: "smile",
    EmojiCategory.FROWN: "frown",
    EmojiCategory.LEFT_WINK: "leftwink",
    EmojiCategory.RIGHT_WINK: "rightwink",
    EmojiCategory.LEFT_WINK_FROWN: "leftwinkfrown",
    EmojiCategory.RIGHT_WINK_FROWN: "rightwinkfrown",
    EmojiCategory.CLOSED_EYE_SMILE: "closed_smile",
    EmojiCategory.CLOSED_EYE_FROWN: "closed_frown",
}

FACE_COLOR = (255, 204, 77, 255)
OUTLINE_COLOR = (64, 40, 0, 255)

# (left eye closed, right eye closed, smiling); left/right are the subject's,
# so the left eye is drawn on the viewer's right.
_FEATURES = {
    EmojiCategory.SMILE: (False, False, True),
    EmojiCategory.FROWN: (False, False, False),
    EmojiCategory.LEFT_WINK: (True, False, True),
    EmojiCategory.RIGHT_WINK: (False, True, True),
    EmojiCategory.LEFT_WINK_FROWN: (True, False, False),
    EmojiCategory.RIGHT_WINK_FROWN: (False, True, False),
    EmojiCategory.CLOSED_EYE_SMILE: (True, True, True),
    EmojiCategory.CLOSED_EYE_FROWN: (True, True, False),
}


def asset_name(category: EmojiCategory) -> str:
    return ASSET_NAMES[category]


def _draw_eye(d: ImageDraw.ImageDraw, cx: float, cy: float, r: float, closed: bool, width: int) -> None:
    if closed:
        d.line((cx - r, cy, cx + r, cy), fill=OUTLINE_COLOR, width=width)
    else:
        d.ellipse((cx - r * 0.6, cy - r, cx + r * 0.6, cy + r), fill=OUTLINE_COLOR)


def render_emoji(category: EmojiCategory, size: int = 256) -> Image.Image:
    """Draw a simple RGBA emoji for ``category``."""
    left_closed, right_closed, smiling = _FEATURES[category]
    img = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    d = ImageDraw.Draw(img)
    stroke = max(1, size // 32)

    d.ellipse((0, 0, size - 1, size - 1), fill=FACE_COLOR, outline=OUTLINE_COLOR, width=stroke)

    eye_y = size * 0.38
    eye_r = size * 0.08
    _draw_eye(d, size * 0.35, eye_y, eye_r, right_closed, stroke * 2)
    _draw_eye(d, size * 0.65, eye_y, eye_r, left_closed, stroke * 2)

    if smiling:
        d.arc((size * 0.25, size * 0.40, size * 0.75, size * 0.80), start=20, end=160,
              fill=OUTLINE_COLOR, width=stroke * 2)
    else:
        d.arc((size * 0.30, size * 0.65, size * 0.70, size * 0.95), start=200, end=340,
              fill=OUTLINE_COLOR, width=stroke * 2)
    return img


def write_assets(out_dir: str, size: int = 256) -> List[str]:
    """Render all eight emojis into ``out_dir`` as PNG files."""
    os.makedirs(out_dir, exist_ok=True)
    paths = []
    for category, name in ASSET_NAMES.items():
        path = os.path.join(out_dir, f"{name}.png")
        render_emoji(category, size).save(path, format="PNG")
        paths.append(path)
    logger.info("Wrote %d emoji assets to %s", len(paths), out_dir)
    return paths


class EmojiAssets:
    """
    Category -> emoji image lookup.

    With ``assets_dir`` the PNG files named in ASSET_NAMES are loaded from disk
    (a missing file gives None); without it the built-in drawings are used.
    """

    def __init__(self, assets_dir: Optional[str] = None, size: int = 256):
        self.assets_dir = assets_dir
        self.size = size
        self._cache: Dict[EmojiCategory, Image.Image] = {}

    def get(self, category: EmojiCategory) -> Optional[Image.Image]:
        if category in self._cache:
            return self._cache[category]

        name = ASSET_NAMES.get(category)
        if name is None:
            return None

        if self.assets_dir is None:
            img = render_emoji(category, self.size)
        else:
            path = os.path.join(self.assets_dir, f"{name}.png")
            if not os.path.exists(path):
                logger.warning("Emoji asset missing: %s", path)
                return None
            with Image.open(path) as f:
                img = f.convert("RGBA")

        self._cache[category] = img
        return img
