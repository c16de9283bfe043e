# emojify/models.py
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from PIL import Image
from pydantic import BaseModel


class EmojiCategory(str, Enum):
    SMILE = "SMILE"
    FROWN = "FROWN"
    LEFT_WINK = "LEFT_WINK"
    RIGHT_WINK = "RIGHT_WINK"
    LEFT_WINK_FROWN = "LEFT_WINK_FROWN"
    RIGHT_WINK_FROWN = "RIGHT_WINK_FROWN"
    CLOSED_EYE_SMILE = "CLOSED_EYE_SMILE"
    CLOSED_EYE_FROWN = "CLOSED_EYE_FROWN"


@dataclass(frozen=True)
class BoundingBox:
    x: float
    y: float
    width: float
    height: float

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2


@dataclass(frozen=True)
class FaceSignals:
    smiling_probability: float
    left_eye_open_probability: float
    right_eye_open_probability: float
    bounding_box: BoundingBox


@dataclass
class FaceResult:
    index: int
    signals: FaceSignals
    category: EmojiCategory
    applied: bool


@dataclass
class EmojifyResult:
    image: Image.Image
    faces: List[FaceResult] = field(default_factory=list)
    messages: List[str] = field(default_factory=list)

    def summary(self) -> dict:
        return {
            "face_count": len(self.faces),
            "faces": [
                {
                    "index": f.index,
                    "category": f.category.value,
                    "applied": f.applied,
                    "smiling_probability": round(float(f.signals.smiling_probability), 4),
                    "left_eye_open_probability": round(float(f.signals.left_eye_open_probability), 4),
                    "right_eye_open_probability": round(float(f.signals.right_eye_open_probability), 4),
                    "bounding_box": {
                        "x": f.signals.bounding_box.x,
                        "y": f.signals.bounding_box.y,
                        "width": f.signals.bounding_box.width,
                        "height": f.signals.bounding_box.height,
                    },
                }
                for f in self.faces
            ],
            "messages": list(self.messages),
        }


class BoundingBoxIn(BaseModel):
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


class FaceSignalsIn(BaseModel):
    smiling_probability: float
    left_eye_open_probability: float
    right_eye_open_probability: float
    bounding_box: Optional[BoundingBoxIn] = None

    def to_signals(self) -> FaceSignals:
        box = self.bounding_box or BoundingBoxIn()
        return FaceSignals(
            smiling_probability=self.smiling_probability,
            left_eye_open_probability=self.left_eye_open_probability,
            right_eye_open_probability=self.right_eye_open_probability,
            bounding_box=BoundingBox(box.x, box.y, box.width, box.height),
        )


class ClassifyResponse(BaseModel):
    category: EmojiCategory
    asset: str


class FaceOut(BaseModel):
    index: int
    category: EmojiCategory
    applied: bool
    smiling_probability: float
    left_eye_open_probability: float
    right_eye_open_probability: float
    bounding_box: BoundingBoxIn


class EmojifyResponse(BaseModel):
    timestamp_utc: str
    image_filename: str
    width: int
    height: int
    face_count: int
    faces: List[FaceOut]
    messages: List[str]


class ListResponse(BaseModel):
    images: List[str]
    jsons: List[str]
