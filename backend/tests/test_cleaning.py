import time

import pytest

from docingest.extraction.cleaning import clean_basic, clean_structured, sanitize_model_output, strip_structure

from tests.conftest import CLEAN_PROSE, HEAVY_ARTIFACTS


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Hello BT World ET", "Hello World"),
        ("helloBTWorld", "hello World"),
        ("PDFDocument", "PDF Document"),
        ("/Type /Page Intro text", "Intro text"),
        ("/Length 42 body", "body"),
        ("100 200 re Intro", "Intro"),
        ("1 0 obj << /Filter /FlateDecode >> Summary", "Summary"),
        ("12.5 7.25 re page", "page"),
        ("ABc", "ABc"),
        ("caf\x00e au lait", "cafe au lait"),
        ("  spaced \n\n\n out\t", "spaced out"),
    ],
)
def test_clean_structured(raw, expected):
    assert clean_structured(raw) == expected


def test_clean_structured_leaves_prose_alone():
    assert clean_structured(CLEAN_PROSE) == CLEAN_PROSE


def test_clean_structured_removes_tokens_exposed_by_removal():
    # dropping "BT" out of "EBTT" leaves "ET", which must go too
    assert clean_structured("EBTT text") == "text"


@pytest.mark.parametrize(
    "raw",
    [
        CLEAN_PROSE,
        HEAVY_ARTIFACTS,
        "EBTT text",
        "5 6 7 8 ab cd",
        "strstreameam plain",
        "aBcDeFGHij 12 34 Tj /F1 12 Tf",
        "1 2 1 2 x y kept",
        "/A /A /B tail",
        "12.5 7.25 re page",
        "",
    ],
)
def test_clean_structured_is_idempotent(raw):
    once = clean_structured(raw)
    assert clean_structured(once) == once


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("E" * 500 + "BT" + "T" * 500 + " kept", " kept"),
        ("1 2 " * 3 + "x " * 3 + "kept", " kept"),
        ("/A " * 3 + "/B " * 3 + "kept", "   kept"),
        ("/Name 12.5 rest", ".5 rest"),
        ("B\x00T kept", " kept"),
    ],
)
def test_strip_structure_removes_nested_constructs_in_one_scan(raw, expected):
    assert strip_structure(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("A" * 50_000, "A" * 50_000),
        ("E" * 20_000 + "BT" + "T" * 20_000, ""),
        ("1 2 " * 5_000 + "x " * 5_000, ""),
        ("1" * 50_000 + " x", "1" * 50_000 + " x"),
        ("AB" * 25_000 + "c", "AB" * 24_999 + "A Bc"),
    ],
)
def test_clean_structured_runs_in_linear_time(raw, expected):
    started = time.perf_counter()
    assert clean_structured(raw) == expected
    assert time.perf_counter() - started < 5.0


def test_clean_basic_only_strips_container_tokens_and_whitespace():
    assert clean_basic("endstream Hello  BT world\n\nET") == "Hello world"
    # operators and binary survive the cheap pass
    assert clean_basic("Td x\x00y") == "Td x\x00y"


def test_sanitize_model_output():
    reply = "```json\n{}\n```Hello [note] world (aside) & co!"
    assert sanitize_model_output(reply) == "Hello world co!"


def test_sanitize_model_output_keeps_basic_punctuation():
    reply = "Intro: first; second, third - done? yes! end."
    assert sanitize_model_output(reply) == reply


def test_sanitize_model_output_handles_none():
    assert sanitize_model_output(None) == ""
