# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.15
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/test_normalization.py

import os
import unicodedata

import pytest

from namenorm.core.normalization import (
    compose,
    decompose,
    decomposed_breakdown,
    display_text,
    is_decomposed,
    normalization_form,
    normalization_label,
    scalar_codes,
)

SAMPLES = [
    "caf\u00e9.txt",
    "na\u00efve r\u00e9sum\u00e9.doc",
    "\u212bngstr\u00f6m.csv",          # ANGSTROM SIGN, a singleton decomposition
    "\ud55c\uad6d\uc5b4 \ud30c\uc77c.hwp",  # Hangul syllables
    "\u00dcber.pdf",
    "\u00f1and\u00fa",
    "\u0395\u03bb\u03bb\u03b7\u03bd\u03b9\u03ba\u03ac",  # Greek with tonos
    "plain.txt",
    "",
]

name_cases = [
    ("cafe\u0301.txt", True),                 # e + COMBINING ACUTE
    ("caf\u00e9.txt", False),                 # precomposed
    ("resume.txt", False),                    # ASCII equals its NFD but composes to itself
    ("", False),
    ("u\u0308ber.txt", True),
    ("\u1112\u1161\u11ab\u1100\u1173\u11af", True),  # Hangul as conjoining jamo
    ("\ud55c\uae00", False),                  # Hangul as syllables
    ("caf\u00e9 cafe\u0301", False),          # mixed forms are not the decomposition
    ("a\u0301", True),
    ("\u0301", False),                        # lone combining mark composes to itself
]


@pytest.mark.parametrize("name,expected", name_cases)
def test_is_decomposed(name, expected):
    assert is_decomposed(name) is expected


@pytest.mark.parametrize("sample", SAMPLES)
def test_composed_names_are_never_decomposed(sample):
    assert not is_decomposed(compose(sample))


@pytest.mark.parametrize("sample", SAMPLES)
def test_decomposed_names_are_detected(sample):
    decomposed = decompose(sample)
    if decomposed == compose(sample):
        # nothing decomposable, e.g. plain ASCII
        assert not is_decomposed(decomposed)
    else:
        assert is_decomposed(decomposed)


@pytest.mark.parametrize("sample", SAMPLES)
def test_compose_after_decompose_is_not_decomposed(sample):
    assert not is_decomposed(compose(decompose(sample)))


def test_compose_and_decompose_match_unicodedata():
    name = "cafe\u0301"
    assert compose(name) == unicodedata.normalize("NFC", name) == "caf\u00e9"
    assert decompose("caf\u00e9") == name


def test_normalization_form():
    assert normalization_form("cafe\u0301.txt") == "NFD"
    assert normalization_form("caf\u00e9.txt") == "NFC"
    assert normalization_form("resume.txt") == "NFC"


def test_decomposed_breakdown_separates_combining_marks():
    breakdown = decomposed_breakdown("cafe\u0301")
    assert breakdown == "c a f e \u0301"
    # same listing whichever form goes in
    assert decomposed_breakdown("caf\u00e9") == breakdown


def test_decomposed_breakdown_hangul():
    assert decomposed_breakdown("\ud55c") == "\u1112 \u1161 \u11ab"


def test_scalar_codes():
    assert scalar_codes("e\u0301") == "U+0065 U+0301"
    assert scalar_codes("\u00e9") == "U+00E9"
    assert scalar_codes("") == ""
    assert scalar_codes("\U0001F600") == "U+1F600"


def test_normalization_label():
    assert normalization_label("resume.txt") == "NFC"
    assert normalization_label("cafe\u0301.txt") == "NFD: c a f e \u0301 . t x t"


def test_display_text():
    assert display_text("caf\u00e9.txt") == "caf\u00e9.txt"
    assert display_text(os.fsdecode(b"bad\xff.txt")) == "bad\\xff.txt"
    assert display_text("lone\ud800") == "lone\\ud800"
