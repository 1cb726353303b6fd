import os
import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT_DIR))

os.environ.setdefault("TEXTURE_ASSET_BASE_URL", "https://assets.example.com")
os.environ.setdefault("TEXTURE_URL_SCHEME_PREFIXES", "http://,https://")

from art_framer.textures import clear_texture_validation_cache  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_texture_validation_cache():
    clear_texture_validation_cache()
    yield
    clear_texture_validation_cache()
