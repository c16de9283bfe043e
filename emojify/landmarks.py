# emojify/landmarks.py
"""
Geometry on FaceMesh landmarks. Landmarks are anything with normalised
``x``/``y`` attributes, so this module needs no MediaPipe import.
"""
import math
from typing import Optional, Sequence, Tuple

import numpy as np

from emojify.models import BoundingBox

# Landmark indices (upper lid, lower lid, inner corner, outer corner), subject's left / right eye
LEFT_EYE = (386, 374, 362, 263)
RIGHT_EYE = (159, 145, 133, 33)

EYE_CLOSED_RATIO = 0.10
EYE_OPEN_RATIO = 0.25


def _aperture(landmarks: Sequence, eye: Tuple[int, int, int, int], w: int, h: int) -> float:
    def px(idx): return (landmarks[idx].x * w, landmarks[idx].y * h)
    up, low, inner, outer = (px(i) for i in eye)
    return math.dist(up, low) / (math.dist(inner, outer) + 1e-6)


def eye_aperture_ratios(landmarks: Sequence, w: int, h: int) -> Tuple[float, float]:
    """(left, right) lid distance over eye width."""
    return _aperture(landmarks, LEFT_EYE, w, h), _aperture(landmarks, RIGHT_EYE, w, h)


def eye_open_probability(aperture: float,
                         closed_ratio: float = EYE_CLOSED_RATIO,
                         open_ratio: float = EYE_OPEN_RATIO) -> float:
    span = open_ratio - closed_ratio
    return float(np.clip((aperture - closed_ratio) / span, 0.0, 1.0))


def bounding_box(landmarks: Sequence, w: int, h: int) -> BoundingBox:
    """Landmark extent in pixels, clipped to the image."""
    xs = [lm.x * w for lm in landmarks]
    ys = [lm.y * h for lm in landmarks]
    x0, y0 = max(0.0, min(xs)), max(0.0, min(ys))
    x1, y1 = min(float(w), max(xs)), min(float(h), max(ys))
    return BoundingBox(x=x0, y=y0, width=x1 - x0, height=y1 - y0)


def crop(image: np.ndarray, box: BoundingBox) -> Optional[np.ndarray]:
    x0, y0 = int(box.x), int(box.y)
    x1, y1 = int(math.ceil(box.x + box.width)), int(math.ceil(box.y + box.height))
    region = image[y0:y1, x0:x1]
    return region if region.size else None
