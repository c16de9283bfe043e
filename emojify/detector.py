# emojify/detector.py
from typing import List

import cv2
import numpy as np
from deepface import DeepFace
import mediapipe as mp

from emojify import landmarks
from emojify.models import FaceSignals

mp_face_mesh = mp.solutions.face_mesh


class FaceSignalDetector:
    """
    MediaPipe + DeepFace face detector:
      - FaceMesh in static-image mode (no tracking) for faces and landmarks
      - eye aperture ratio -> eye-open probability
      - DeepFace happy score on the face crop -> smiling probability

    Use as a context manager so the mesh is released on every exit path.
    """

    def __init__(self,
                 max_faces: int = 10,
                 min_detection_confidence: float = 0.5,
                 detector_backend: str = "skip",
                 eye_closed_ratio: float = landmarks.EYE_CLOSED_RATIO,
                 eye_open_ratio: float = landmarks.EYE_OPEN_RATIO):
        self.max_faces = max_faces
        self.min_detection_confidence = min_detection_confidence
        self.detector_backend = detector_backend
        self.eye_closed_ratio = eye_closed_ratio
        self.eye_open_ratio = eye_open_ratio
        self._mesh = None

    # ---------- lifecycle ----------
    def __enter__(self) -> "FaceSignalDetector":
        self._mesh = mp_face_mesh.FaceMesh(static_image_mode=True,
                                           max_num_faces=self.max_faces,
                                           refine_landmarks=True,
                                           min_detection_confidence=self.min_detection_confidence)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def release(self) -> None:
        if self._mesh is not None:
            self._mesh.close()
            self._mesh = None

    # ---------- measurements ----------
    def eye_open_probability(self, aperture: float) -> float:
        return landmarks.eye_open_probability(aperture, self.eye_closed_ratio, self.eye_open_ratio)

    # ---------- deepface ----------
    def smiling_probability(self, face_bgr: np.ndarray) -> float:
        """Return happiness probability in [0,1], tolerant to API changes."""
        try:
            out = DeepFace.analyze(
                img_path=face_bgr,
                actions=["emotion"],
                detector_backend=self.detector_backend,
                enforce_detection=False
            )
        except TypeError:
            out = DeepFace.analyze(img_path=face_bgr, actions=["emotion"])

        res = out[0] if isinstance(out, list) else out
        emo = res.get("emotion") or res.get("emotions") or {}
        val = float(emo.get("happy", 0.0))
        return val/100.0 if val > 1.0 else val

    # ---------- pipeline ----------
    def detect(self, image_rgb: np.ndarray) -> List[FaceSignals]:
        if self._mesh is None:
            raise RuntimeError("Detector not acquired; use it inside a 'with' block.")

        h, w = image_rgb.shape[:2]
        res = self._mesh.process(image_rgb)
        if not res.multi_face_landmarks:
            return []

        image_bgr = cv2.cvtColor(image_rgb, cv2.COLOR_RGB2BGR)
        faces = []
        for face_landmarks in res.multi_face_landmarks:
            lm = face_landmarks.landmark
            box = landmarks.bounding_box(lm, w, h)
            left_ap, right_ap = landmarks.eye_aperture_ratios(lm, w, h)

            crop = landmarks.crop(image_bgr, box)
            happy = self.smiling_probability(crop) if crop is not None else 0.0

            faces.append(FaceSignals(
                smiling_probability=happy,
                left_eye_open_probability=self.eye_open_probability(left_ap),
                right_eye_open_probability=self.eye_open_probability(right_ap),
                bounding_box=box,
            ))
        return faces

