from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

WRAP_VALUES = ("Black", "White", "ImageWrap", "MirrorWrap")
COLOR_VALUES = (
    "black",
    "white",
    "brown",
    "dark grey",
    "light grey",
    "natural",
    "gold",
    "silver",
)

# Catalog API values are lower-case; the order API capitalizes wrap values.
ATTRIBUTE_MAPPINGS: dict[str, dict[str, str]] = {
    "wrap": {value.lower(): value for value in WRAP_VALUES},
    "color": {value: value for value in COLOR_VALUES},
}

_CATALOG_KEY_RENAMES = {"frameColour": "color"}


def normalize_attributes(attributes: Mapping[str, Any] | None) -> dict[str, str]:
    """
    Canonical form of a product's custom attributes, used for quote matching.

    Keys and values are stringified, stripped and lower-cased. Entries whose
    value is None, or whose key or value is blank after stripping, are dropped.
    The returned dict is built in sorted key order because the quote key
    serialization is order-sensitive.
    """
    if not attributes or not isinstance(attributes, Mapping):
        return {}

    collected: dict[str, str] = {}
    # Sorting the raw keys first keeps collisions like "Size"/"size" deterministic.
    for key, value in sorted(attributes.items(), key=lambda item: str(item[0])):
        if value is None:
            continue
        name = str(key).strip().lower()
        text = str(value).strip().lower()
        if not name or not text:
            continue
        collected[name] = text

    return {key: collected[key] for key in sorted(collected)}


def quote_key(sku: Any, attributes: Mapping[str, Any] | None) -> str:
    serialized = json.dumps(
        normalize_attributes(attributes),
        separators=(",", ":"),
        ensure_ascii=False,
    )
    normalized_sku = "" if sku is None else str(sku).strip().lower()
    return f"{normalized_sku}:{serialized}"


def normalize_attribute_value(attribute_name: str, value: str) -> str:
    lower_value = value.lower()
    if attribute_name == "wrap":
        return ATTRIBUTE_MAPPINGS["wrap"].get(lower_value, value)
    if attribute_name == "color":
        return ATTRIBUTE_MAPPINGS["color"].get(lower_value, lower_value)
    return lower_value


def normalize_attribute_values(attributes: Mapping[str, str | None]) -> dict[str, str]:
    return {
        key: normalize_attribute_value(key, value)
        for key, value in attributes.items()
        if value is not None
    }


def are_attribute_values_equal(attribute_name: str, first: str, second: str) -> bool:
    return normalize_attribute_value(attribute_name, first) == normalize_attribute_value(
        attribute_name, second
    )


def catalog_to_official_attributes(
    catalog_attributes: Mapping[str, list[str] | str | None],
) -> dict[str, str]:
    """
    Convert catalog attributes into the shape the order API accepts.

    The catalog returns some attributes as lists of allowed values; only the
    first one is used. ``frameColour`` is renamed to ``color``.
    """
    official: dict[str, str] = {}
    for key, value in catalog_attributes.items():
        if value is None:
            continue
        string_value = value[0] if isinstance(value, list) and value else value
        if not string_value or not isinstance(string_value, str):
            continue
        official_key = _CATALOG_KEY_RENAMES.get(key, key)
        official[official_key] = normalize_attribute_value(official_key, string_value)
    return official


def attribute_value_variations(attribute_name: str, value: str) -> list[str]:
    normalized = normalize_attribute_value(attribute_name, value)
    variations = [normalized]
    if attribute_name == "wrap":
        variations.append(normalized.lower())
    return list(dict.fromkeys(variations))


def is_valid_wrap_value(value: str) -> bool:
    return normalize_attribute_value("wrap", value) in WRAP_VALUES


def is_valid_color_value(value: str) -> bool:
    return normalize_attribute_value("color", value) in COLOR_VALUES
