from __future__ import annotations

import itertools

from art_framer.attributes import (
    are_attribute_values_equal,
    attribute_value_variations,
    catalog_to_official_attributes,
    is_valid_color_value,
    is_valid_wrap_value,
    normalize_attribute_value,
    normalize_attribute_values,
    normalize_attributes,
    quote_key,
)


def test_normalize_attributes_lowercases_and_strips():
    assert normalize_attributes({"Size": " Large "}) == {"size": "large"}
    assert normalize_attributes({"Size": " Large "}) == normalize_attributes({"size": "large"})


def test_normalize_attributes_drops_empty_and_none_values():
    normalized = normalize_attributes({"Color": "", "Wrap": None, "Size": "M"})

    assert normalized == {"size": "m"}


def test_normalize_attributes_handles_missing_input():
    assert normalize_attributes(None) == {}
    assert normalize_attributes({}) == {}
    assert normalize_attributes("size=large") == {}


def test_normalize_attributes_output_is_sorted():
    normalized = normalize_attributes({"wrap": "Black", "Color": "White", "mount": "2.4mm"})

    assert list(normalized) == ["color", "mount", "wrap"]


def test_normalize_attributes_ignores_key_order():
    items = [("Size", "Large"), ("color", "Black"), ("Wrap", " ImageWrap"), ("finish", "")]
    results = {
        tuple(normalize_attributes(dict(permutation)).items())
        for permutation in itertools.permutations(items)
    }

    assert len(results) == 1


def test_normalize_attributes_stringifies_values():
    assert normalize_attributes({"copies": 2, "Glazed": True}) == {"copies": "2", "glazed": "true"}


def test_normalize_attributes_key_collisions_do_not_depend_on_order():
    first = normalize_attributes({"Size": "Small", "size": "Large"})
    second = normalize_attributes({"size": "Large", "Size": "Small"})

    assert first == second


def test_quote_key_matches_equivalent_requests():
    assert quote_key("ABC123", {"Size": "Large", "Color": ""}) == quote_key("abc123", {"size": "large"})


def test_quote_key_format():
    key = quote_key("GLOBAL-CFPM-16X20", {"Wrap": "Black", "color": "White"})

    assert key == 'global-cfpm-16x20:{"color":"white","wrap":"black"}'


def test_quote_key_without_attributes():
    assert quote_key("SKU-1", None) == "sku-1:{}"
    assert quote_key(None, None) == ":{}"


def test_normalize_attributes_drops_whitespace_only_values():
    assert normalize_attributes({"finish": "  ", "Size": "M"}) == {"size": "m"}
    assert quote_key("sku", {"finish": "  "}) == quote_key("sku", {"finish": ""}) == quote_key("sku", {})


def test_normalize_attributes_strips_keys():
    assert normalize_attributes({" Size ": "Large", "   ": "x"}) == {"size": "large"}
    assert quote_key("sku", {" Size ": "Large"}) == quote_key("sku", {"size": "large"})


def test_quote_key_accepts_non_string_sku():
    assert quote_key(123, {"size": "large"}) == '123:{"size":"large"}'
    assert quote_key(0, None) == "0:{}"
    assert quote_key(" ABC123 ", None) == quote_key("abc123", None)


def test_quote_key_distinguishes_different_values():
    assert quote_key("sku", {"size": "large"}) != quote_key("sku", {"size": "small"})


def test_normalize_attribute_value_formats_wrap_for_order_api():
    assert normalize_attribute_value("wrap", "black") == "Black"
    assert normalize_attribute_value("wrap", "imagewrap") == "ImageWrap"
    assert normalize_attribute_value("wrap", "MIRRORWRAP") == "MirrorWrap"
    assert normalize_attribute_value("wrap", "Gloss") == "Gloss"


def test_normalize_attribute_value_lowercases_colors_and_others():
    assert normalize_attribute_value("color", "BLACK") == "black"
    assert normalize_attribute_value("color", "Teal") == "teal"
    assert normalize_attribute_value("mount", "2.4MM") == "2.4mm"


def test_normalize_attribute_values_drops_none():
    assert normalize_attribute_values({"wrap": "black", "color": "BLACK", "mount": None}) == {
        "wrap": "Black",
        "color": "black",
    }


def test_are_attribute_values_equal():
    assert are_attribute_values_equal("wrap", "ImageWrap", "imagewrap")
    assert not are_attribute_values_equal("color", "Black", "White")


def test_catalog_to_official_attributes():
    official = catalog_to_official_attributes(
        {
            "frameColour": ["Black", "White"],
            "wrap": "imagewrap",
            "mount": [],
            "glaze": None,
            "paperType": "",
        }
    )

    assert official == {"color": "black", "wrap": "ImageWrap"}


def test_attribute_value_variations():
    assert attribute_value_variations("wrap", "black") == ["Black", "black"]
    assert attribute_value_variations("color", "Gold") == ["gold"]


def test_attribute_value_validity_checks():
    assert is_valid_wrap_value("mirrorwrap")
    assert not is_valid_wrap_value("gloss")
    assert is_valid_color_value("Dark Grey")
    assert not is_valid_color_value("teal")
