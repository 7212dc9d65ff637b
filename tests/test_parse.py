import logging

import pytest

from logo_gallery.catalog.parse import (
    absolutize_source,
    is_fallback,
    normalize_type,
    parse_catalog,
    parse_identifier,
    parse_leading_int,
    parse_year,
    split_camel_case,
    strip_extension,
)
from logo_gallery.io.models import LogoRecord, fallback_record

from conftest import BARCELONA, CATALUNYA


def test_parse_barcelona_archives():
    record = parse_identifier(BARCELONA, 1)
    assert record == LogoRecord(
        id=1,
        name="Barcelona Archives",
        year=1922,
        color="blue",
        type="serif",
        image_url="/logos/BarcelonaArchives|Blue|www.arxiu.barcelona|Serif|1922.png",
        source="https://www.arxiu.barcelona",
    )


def test_parse_catalunya_radio_maps_type_to_filter_vocabulary():
    record = parse_identifier(CATALUNYA, 2)
    assert record.id == 2
    assert record.name == "Catalunya Radio"
    assert record.year == 1983
    assert record.color == "red"
    assert record.type == "sans-serif"
    assert record.source == "https://www.ccma.cat"


def test_empty_identifier_returns_fallback(caplog):
    with caplog.at_level(logging.WARNING, logger="logo_gallery.catalog.parse"):
        record = parse_identifier("", 5)
    assert record == fallback_record(5)
    assert record.name == "Invalid Logo"
    assert record.image_url == "/logos/default.png"
    assert "Invalid filename format" in caplog.text


@pytest.mark.parametrize(
    "raw",
    [
        None,
        "OnlyName.png",
        "A|B|C|D.png",
        "A|B|C|D|1990|Extra.png",
        "A||www.x.com|Serif|1990.png",
        "A|Blue|www.x.com|Serif|.png",
        "|||||",
    ],
)
def test_malformed_identifiers_never_raise(raw):
    record = parse_identifier(raw, 3)
    assert is_fallback(record)
    assert record.id == 3


def test_non_numeric_year_defaults_silently(caplog):
    with caplog.at_level(logging.WARNING, logger="logo_gallery.catalog.parse"):
        record = parse_identifier("Acme|Red|acme.example|Serif|unknown.png", 1)
    assert record.year == 2000
    assert record.name == "Acme"
    assert caplog.records == []


def test_source_without_www_passes_through():
    record = parse_identifier("Acme|Red|http://acme.example|Serif|1950.png", 1)
    assert record.source == "http://acme.example"


def test_custom_base_path():
    record = parse_identifier(BARCELONA, 1, base_path="/static/logos/")
    assert record.image_url == f"/static/logos/{BARCELONA}"
    assert parse_identifier("", 2, base_path="/static").image_url == "/static/default.png"


def test_strip_extension_keeps_dotted_fields():
    assert strip_extension("A|B|www.a.b|D|1900.png") == "A|B|www.a.b|D|1900"
    assert strip_extension("A|B|www.a.b|D|1900") == "A|B|www.a.b|D|1900"
    assert strip_extension("noextension") == "noextension"


def test_split_camel_case():
    assert split_camel_case("BarcelonaArchives") == "Barcelona Archives"
    assert split_camel_case("lowercase") == "lowercase"
    assert split_camel_case("FCBarcelona") == "F C Barcelona"


@pytest.mark.parametrize(
    "value, expected",
    [("1922", 1922), (" 42abc", 42), ("-7", -7), ("abc", None), ("", None), (None, None)],
)
def test_parse_leading_int(value, expected):
    assert parse_leading_int(value) == expected


def test_parse_year_treats_zero_as_missing():
    assert parse_year("0") == 2000
    assert parse_year("1901") == 1901


def test_absolutize_source():
    assert absolutize_source("www.ccma.cat") == "https://www.ccma.cat"
    assert absolutize_source("ccma.cat") == "ccma.cat"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("Serif", "serif"),
        ("SansSerif", "sans-serif"),
        ("Sans-Serif", "sans-serif"),
        ("sans serif", "sans-serif"),
        ("SANSSERIF", "sans-serif"),
        ("BlackLetter", "blackletter"),
        ("Slab Serif", "slab serif"),
        ("Sans", "sans"),
    ],
)
def test_normalize_type(value, expected):
    assert normalize_type(value) == expected


def test_parse_catalog_assigns_positions(wide_catalog):
    assert [record.id for record in wide_catalog] == [1, 2, 3, 4, 5, 6]
    assert is_fallback(wide_catalog[3])
    assert all(record.image_url for record in wide_catalog)
    assert wide_catalog[2].source == "museupicasso.bcn.cat"


def test_parse_catalog_with_progress_bar():
    assert len(parse_catalog([BARCELONA], progress=True)) == 1


def test_real_record_named_invalid_logo_is_not_fallback():
    record = parse_identifier("InvalidLogo|Black|www.x.com|Serif|2000.png", 1)
    assert record.name == "Invalid Logo"
    assert not is_fallback(record)


def test_oversized_year_falls_back_to_default():
    raw = "Acme|Red|www.acme.example|Serif|" + "1" * 5000 + ".png"
    record = parse_identifier(raw, 1)
    assert record.year == 2000
    assert record.name == "Acme"
    assert parse_catalog([raw])[0].year == 2000
    assert parse_leading_int("9" * 5000) is None


@pytest.mark.parametrize("type_field", ["-", "_", " ", "--"])
def test_separator_only_type_keeps_lowercased_field(type_field):
    record = parse_identifier(f"Acme|Red|www.acme.example|{type_field}|1950.png", 1)
    assert record.type == type_field
    assert record.type != ""


def test_unknown_type_is_only_lowercased():
    record = parse_identifier("Acme|Red|www.acme.example|SlabSerif|1950.png", 1)
    assert record.type == "slabserif"
