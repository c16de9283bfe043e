# app/app.py
import os
import streamlit as st
from PIL import Image
from datetime import datetime
import sys
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from emojify.config import Settings, setup_logging
from emojify.core import Emojifier
from emojify.models import EmojifyResult

# ---------- Page ----------
st.set_page_config(page_title="Emojify", page_icon="😜", layout="centered")
st.title("Emojify")
st.caption("Camera or image upload → every face covered by an emoji matching its expression. Auto-saves image + JSON.")

# ---------- Settings + pipeline ----------
settings = Settings.from_env()
setup_logging(settings.log_level)

@st.cache_resource
def get_emojifier() -> Emojifier:
    return Emojifier.from_settings(settings)

emojifier = get_emojifier()

# ---------- UI helpers ----------
def emojify_and_auto_save(pil_img: Image.Image, origin_name: str) -> None:
    try:
        res: EmojifyResult = emojifier.detect_faces_and_overlay_emoji(pil_img, notifier=st.warning)
    except RuntimeError as e:
        st.error(str(e)); return
    except Exception as e:
        st.error(f"Emojify error: {e}"); return

    st.image(res.image, caption=f"{len(res.faces)} face(s)", use_container_width=True)
    with st.expander("Details (JSON preview)"):
        st.json(res.summary())

    base = os.path.splitext(origin_name)[0] if origin_name else f"capture_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
    img_path = emojifier.save_image(res.image, base)
    json_path = emojifier.save_json(res, base)
    st.success(f"Saved!\n\n📷 {img_path}\n📄 {json_path}")

# ---------- Sidebar ----------
with st.sidebar:
    st.header("Settings")
    st.markdown(
        f"Output dir: `{settings.output_dir}`  \n"
        f"Assets: `{settings.assets_dir or 'built-in'}`  \n"
        f"Max faces: **{settings.max_faces}**"
    )

# ---------- Modes ----------
mode = st.radio("Choose input mode", ["📷 Camera", "🖼️ Image upload"], horizontal=True)

if mode.startswith("📷"):
    img_input = st.camera_input("Camera (allow access, then take a snapshot)")
    if img_input is not None and st.button("😜 Emojify"):
        frame = Image.open(img_input).convert("RGB")
        emojify_and_auto_save(frame, f"camera_{int(datetime.now().timestamp())}.jpg")
else:
    file = st.file_uploader("Upload an image", type=["jpg", "jpeg", "png"])
    if file is not None:
        pil = Image.open(file).convert("RGB")
        st.image(pil, caption="Uploaded image", use_container_width=True)
        if st.button("😜 Emojify"):
            emojify_and_auto_save(pil, file.name)
