# emojify/config.py
import logging
import os
from dataclasses import dataclass
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    output_dir: str = "outputs"
    assets_dir: Optional[str] = None
    detector_backend: str = "skip"
    max_faces: int = 10
    min_detection_confidence: float = 0.5
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            output_dir=os.getenv("OUTPUT_DIR", "outputs"),
            assets_dir=os.getenv("EMOJI_ASSETS_DIR") or None,
            detector_backend=os.getenv("DETECTOR_BACKEND", "skip"),
            max_faces=_env_int("MAX_FACES", 10),
            min_detection_confidence=_env_float("MIN_DETECTION_CONFIDENCE", 0.5),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
