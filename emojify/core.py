# emojify/core.py
import json
import logging
import os
from typing import Callable, Optional

import numpy as np
from PIL import Image

from emojify.assets import EmojiAssets
from emojify.classifier import classify
from emojify.compositor import overlay
from emojify.config import Settings
from emojify.models import EmojifyResult, FaceResult

logger = logging.getLogger(__name__)

NO_FACES_MESSAGE = "No faces detected in the picture."
NO_EMOJI_MESSAGE = "No Emoji Case Detected"

Notifier = Callable[[str], None]


def _log_notifier(message: str) -> None:
    logger.warning(message)


def default_detector_factory(settings: Settings):
    """Build a FaceSignalDetector; MediaPipe and DeepFace are imported only here."""
    def factory():
        try:
            from emojify.detector import FaceSignalDetector
        except ImportError as e:
            raise RuntimeError(
                f"Face detector unavailable ({e}). Install with: pip install 'emojify[detector]'"
            ) from e
        return FaceSignalDetector(max_faces=settings.max_faces,
                                  min_detection_confidence=settings.min_detection_confidence,
                                  detector_backend=settings.detector_backend)
    return factory


class Emojifier:
    """
    Face -> emoji pipeline:
      - detector (scoped per call) returns FaceSignals for every face
      - classifier picks one of eight emoji categories
      - compositor draws the emoji over the face on an accumulating canvas
      - persistent outputs/images + outputs/json
    """

    def __init__(self,
                 output_dir: str = "outputs",
                 assets: Optional[EmojiAssets] = None,
                 detector_factory: Optional[Callable] = None,
                 notifier: Optional[Notifier] = None,
                 settings: Optional[Settings] = None):
        self.settings = settings or Settings(output_dir=output_dir)
        self.output_dir = output_dir
        self.images_dir = os.path.join(output_dir, "images")
        self.json_dir = os.path.join(output_dir, "json")
        os.makedirs(self.images_dir, exist_ok=True)
        os.makedirs(self.json_dir, exist_ok=True)

        self.assets = assets or EmojiAssets(self.settings.assets_dir)
        self.detector_factory = detector_factory or default_detector_factory(self.settings)
        self.notifier = notifier or _log_notifier

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "Emojifier":
        return cls(output_dir=settings.output_dir, settings=settings, **kwargs)

    # ---------- pipeline ----------
    def detect_faces_and_overlay_emoji(self, picture: Image.Image,
                                       notifier: Optional[Notifier] = None) -> EmojifyResult:
        notify = notifier or self.notifier
        result = EmojifyResult(image=picture)

        def emit(message: str) -> None:
            result.messages.append(message)
            notify(message)

        with self.detector_factory() as detector:
            faces = detector.detect(np.array(picture.convert("RGB")))
            logger.info("detect_faces_and_overlay_emoji: number of faces = %d", len(faces))

            if not faces:
                emit(NO_FACES_MESSAGE)
                return result

            for i, face in enumerate(faces):
                category = classify(face)
                emoji = self.assets.get(category)
                if emoji is None:
                    emit(NO_EMOJI_MESSAGE)
                    result.faces.append(FaceResult(i, face, category, applied=False))
                    continue
                try:
                    result.image = overlay(result.image, emoji, face)
                except Exception:
                    logger.exception("Failed to draw %s on face %d", category.value, i)
                    result.faces.append(FaceResult(i, face, category, applied=False))
                    continue
                result.faces.append(FaceResult(i, face, category, applied=True))

        return result

    # ---------- saving ----------
    def save_image(self, pil_img: Image.Image, base_name: str) -> str:
        path = os.path.join(self.images_dir, f"{base_name}.jpg")
        pil_img.convert("RGB").save(path, format="JPEG", quality=95)
        return path

    def save_json(self, result: EmojifyResult, base_name: str) -> str:
        path = os.path.join(self.json_dir, f"{base_name}.json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump(result.summary(), f, ensure_ascii=False, indent=2)
        return path
