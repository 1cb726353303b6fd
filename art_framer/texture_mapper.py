from __future__ import annotations

import re
from collections.abc import Iterable
from typing import get_args

from art_framer.config import settings
from art_framer.schemas import (
    CanvasTextureName,
    CanvasWrapType,
    FrameType,
    MaterialProperties,
    TextureMapType,
    TextureRequest,
    TextureResolution,
)
from art_framer.textures import TextureValidator, texture_validator

_FRAME_TYPES = frozenset(get_args(FrameType))
_WHITESPACE_RE = re.compile(r"\s+")

_COLOR_ALIASES = {
    "black": "black",
    "white": "white",
    "brown": "brown",
    "natural": "natural",
    "dark grey": "dark-grey",
    "dark gray": "dark-grey",
    "light grey": "light-grey",
    "light gray": "light-grey",
    "grey": "grey",
    "gray": "grey",
    "gold": "gold",
    "silver": "silver",
    "antique gold": "antique-gold",
    "antique silver": "antique-silver",
    "antiquegold": "antique-gold",
    "antiquesilver": "antique-silver",
}

_FALLBACK_COLORS = {
    "black": "#000000",
    "white": "#FFFFFF",
    "natural": "#C19A6B",
    "brown": "#654321",
    "dark grey": "#555555",
    "dark gray": "#555555",
    "light grey": "#CCCCCC",
    "light gray": "#CCCCCC",
    "grey": "#808080",
    "gray": "#808080",
    "gold": "#FFD700",
    "silver": "#C0C0C0",
    "antique gold": "#CD853F",
    "antique silver": "#C0C0C0",
}

_HEX_COLOR_NAMES = {
    "1a1a1a": "black",
    "000000": "black",
    "ffffff": "white",
    "f5f5f5": "white",
    "c19a6b": "natural",
    "5c4033": "brown",
    "4a4a4a": "dark grey",
    "b8b8b8": "light grey",
    "d4af37": "gold",
    "c0c0c0": "silver",
}

# First matching hint wins; metallics before woods before plain colours.
_COLOR_HINTS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("gold",), "gold"),
    (("silver",), "silver"),
    (("natural", "oak", "maple"), "natural"),
    (("brown", "walnut", "mahogany"), "brown"),
    (("white", "cream", "ivory"), "white"),
    (("black", "ebony"), "black"),
    (("charcoal",), "dark grey"),
)

_METALLIC_COLORS = frozenset({"gold", "silver", "antique gold", "antique silver"})

_BASE_MATERIALS: dict[str, tuple[float, float]] = {
    "classic": (0.1, 0.5),
    "aluminium": (0.9, 0.2),
    "box": (0.1, 0.6),
    "spacer": (0.1, 0.5),
    "float": (0.1, 0.5),
}


def _require_frame_type(frame_type: str) -> None:
    if frame_type not in _FRAME_TYPES:
        raise ValueError(f"Unsupported frame type: {frame_type}")


def _asset_url(relative_path: str, base_url: str | None = None) -> str:
    base = (base_url or settings.texture_asset_base_url).rstrip("/")
    return f"{base}/prodigi-assets/{relative_path}"


def normalize_color_name(color: str) -> str:
    normalized = color.strip().lower()
    if normalized.startswith("#"):
        normalized = _HEX_COLOR_NAMES.get(normalized[1:], normalized[1:])
    return _COLOR_ALIASES.get(normalized) or _WHITESPACE_RE.sub("-", normalized)


def texture_path(
    frame_type: FrameType,
    color: str,
    map_type: TextureMapType,
    resolution: TextureResolution = "1x",
    *,
    base_url: str | None = None,
) -> str:
    _require_frame_type(frame_type)
    filename = f"{normalize_color_name(color)}-{map_type}-{resolution}.webp"
    return _asset_url(f"frames/{frame_type}/textures/{filename}", base_url)


def mount_texture_path(color: str, *, base_url: str | None = None) -> str:
    return _asset_url(f"mounts/{normalize_color_name(color)}-mount.webp", base_url)


def canvas_texture_path(texture_name: CanvasTextureName, *, base_url: str | None = None) -> str:
    return _asset_url(f"canvas/textures/{texture_name}.webp", base_url)


def canvas_wrap_texture_path(wrap_type: CanvasWrapType, *, base_url: str | None = None) -> str:
    return _asset_url(f"canvas/wraps/{wrap_type}-wrap.webp", base_url)


def resolve_color_name(color: str) -> str | None:
    """
    Map a free-form frame colour to one of the known colour names.

    Accepts known names, the hex codes the storefront uses for swatches
    (``#1a1a1a``), and descriptive names containing a hint such as "oak" or
    "charcoal grey". Returns None when nothing matches.
    """
    normalized = color.strip().lower()
    if normalized in _FALLBACK_COLORS:
        return normalized
    if normalized.startswith("#"):
        return _HEX_COLOR_NAMES.get(normalized[1:])
    for hints, name in _COLOR_HINTS:
        if any(hint in normalized for hint in hints):
            return name
    if "grey" in normalized or "gray" in normalized:
        is_dark = "dark" in normalized or "charcoal" in normalized
        return "dark grey" if is_dark else "light grey"
    return None


def fallback_color(color: str) -> str:
    resolved = resolve_color_name(color)
    if resolved is None:
        return "#000000"
    return _FALLBACK_COLORS[resolved]


def material_properties(frame_type: FrameType, color: str) -> MaterialProperties:
    _require_frame_type(frame_type)
    if frame_type == "classic" and resolve_color_name(color) in _METALLIC_COLORS:
        return MaterialProperties(metalness=0.8, roughness=0.3)
    metalness, roughness = _BASE_MATERIALS[frame_type]
    return MaterialProperties(metalness=metalness, roughness=roughness)


def frame_texture_paths(
    frame_type: FrameType,
    color: str,
    maps: Iterable[TextureMapType] = ("diffuse",),
    resolution: TextureResolution = "1x",
    *,
    validator: TextureValidator | None = None,
    base_url: str | None = None,
) -> list[tuple[TextureMapType, str]]:
    """
    Texture URLs worth loading for a frame, keyed by map type.

    URLs the validator already knows to be broken are left out so the renderer
    falls back to ``fallback_color`` / ``material_properties`` for them.
    """
    if validator is None:
        validator = texture_validator
    candidates = [
        (map_type, texture_path(frame_type, color, map_type, resolution, base_url=base_url))
        for map_type in maps
    ]
    loadable = set(validator.validate_batch([url for _, url in candidates]))
    return [(map_type, url) for map_type, url in candidates if url in loadable]


def texture_request_paths(
    request: TextureRequest,
    *,
    validator: TextureValidator | None = None,
) -> list[tuple[TextureMapType, str]]:
    return frame_texture_paths(
        request.frameType,
        request.color,
        request.maps,
        request.resolution,
        validator=validator,
    )
