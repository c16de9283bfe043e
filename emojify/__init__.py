"""
Emojify: cover every face in a photo with an emoji matching its expression.
"""

from .models import BoundingBox, EmojiCategory, EmojifyResult, FaceResult, FaceSignals
from .classifier import classify
from .compositor import overlay
from .assets import EmojiAssets
from .core import Emojifier

__all__ = ['BoundingBox', 'EmojiCategory', 'EmojifyResult', 'FaceResult', 'FaceSignals',
           'classify', 'overlay', 'EmojiAssets', 'Emojifier']
