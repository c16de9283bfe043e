# api/api.py
import os
import io
import logging
from typing import Optional
from datetime import datetime

from fastapi import FastAPI, UploadFile, File, HTTPException
from fastapi.responses import FileResponse
from fastapi.middleware.cors import CORSMiddleware
from PIL import Image, UnidentifiedImageError

import sys
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from emojify.assets import asset_name
from emojify.classifier import classify
from emojify.config import Settings, setup_logging
from emojify.core import Emojifier
from emojify.models import (
    BoundingBoxIn, ClassifyResponse, EmojifyResponse, FaceOut, FaceSignalsIn, ListResponse,
)

# ------------ Config & folders ------------
settings = Settings.from_env()
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

OUTPUT_DIR = settings.output_dir
IMG_DIR = os.path.join(OUTPUT_DIR, "images")
JSON_DIR = os.path.join(OUTPUT_DIR, "json")

# ------------ App ------------
app = FastAPI(title="Emojify API", version="1.0.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"], allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"],
)

emojifier = Emojifier.from_settings(settings)

# ------------ Helpers ------------
def _now_iso() -> str:
    return datetime.utcnow().replace(microsecond=0).isoformat() + "Z"

def _basename_from(filename: Optional[str]) -> str:
    if not filename:
        return f"capture_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
    return os.path.splitext(os.path.basename(filename))[0]

# ------------ Endpoints ------------
@app.get("/health")
async def health():
    return {"status": "ok", "time": _now_iso(), "output_dir": OUTPUT_DIR, "backend": settings.detector_backend}

@app.post("/classify", response_model=ClassifyResponse)
async def classify_face(signals: FaceSignalsIn):
    category = classify(signals.to_signals())
    return ClassifyResponse(category=category, asset=asset_name(category))

@app.post("/emojify", response_model=EmojifyResponse)
async def emojify(file: UploadFile = File(...)):
    try:
        raw = await file.read()
        pil = Image.open(io.BytesIO(raw)).convert("RGB")
    except (UnidentifiedImageError, OSError):
        raise HTTPException(status_code=400, detail="Invalid image file")

    basename = _basename_from(file.filename)
    try:
        res = emojifier.detect_faces_and_overlay_emoji(pil)
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))
    except Exception as e:
        logger.exception("Emojify failed for %s", basename)
        raise HTTPException(status_code=500, detail=f"Emojify error: {e}")

    emojifier.save_image(res.image, basename)
    emojifier.save_json(res, basename)

    faces = [
        FaceOut(
            index=f.index,
            category=f.category,
            applied=f.applied,
            smiling_probability=f.signals.smiling_probability,
            left_eye_open_probability=f.signals.left_eye_open_probability,
            right_eye_open_probability=f.signals.right_eye_open_probability,
            bounding_box=BoundingBoxIn(
                x=f.signals.bounding_box.x, y=f.signals.bounding_box.y,
                width=f.signals.bounding_box.width, height=f.signals.bounding_box.height,
            ),
        )
        for f in res.faces
    ]
    return EmojifyResponse(
        timestamp_utc=_now_iso(),
        image_filename=f"{basename}.jpg",
        width=res.image.width,
        height=res.image.height,
        face_count=len(faces),
        faces=faces,
        messages=res.messages,
    )

@app.get("/list", response_model=ListResponse)
async def list_outputs():
    imgs = sorted([f for f in os.listdir(IMG_DIR) if f.lower().endswith(".jpg")])
    jsns = sorted([f for f in os.listdir(JSON_DIR) if f.lower().endswith(".json")])
    return ListResponse(images=imgs, jsons=jsns)

@app.get("/results/{basename}")
async def get_result(basename: str):
    path = os.path.join(JSON_DIR, f"{basename}.json")
    if not os.path.exists(path):
        raise HTTPException(status_code=404, detail="Result not found")
    return FileResponse(path, media_type="application/json", filename=f"{basename}.json")

@app.get("/images/{basename}")
async def get_image(basename: str):
    path = os.path.join(IMG_DIR, f"{basename}.jpg")
    if not os.path.exists(path):
        raise HTTPException(status_code=404, detail="Image not found")
    return FileResponse(path, media_type="image/jpeg", filename=f"{basename}.jpg")
