# make_assets.py
import os, sys
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from emojify.assets import write_assets
from emojify.config import setup_logging

out_dir = sys.argv[1] if len(sys.argv) > 1 else os.path.join("assets", "emoji")
size = int(sys.argv[2]) if len(sys.argv) > 2 else 256

setup_logging()
paths = write_assets(out_dir, size)
print(f"{len(paths)} emoji assets created in {out_dir}")
