# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.12
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/namenorm/core/normalization.py

"""
Unicode normalization checks for filenames.

macOS (HFS+, and APFS through many tools) hands out filenames in decomposed
form (NFD): "é" is stored as "e" followed by U+0301 COMBINING ACUTE ACCENT,
and Hangul syllables are stored as separate jamo. Linux and Windows keep
names as given, usually composed (NFC). These helpers detect NFD names and
produce their NFC equivalents.

All comparisons are over code point sequences; nothing here is locale-aware.
"""

import os
import unicodedata
from typing import Literal

NFC: Literal["NFC"] = "NFC"
NFD: Literal["NFD"] = "NFD"

NormalizationForm = Literal["NFC", "NFD"]


def compose(name: str) -> str:
    """Return the canonical composition (NFC) of name."""
    return unicodedata.normalize(NFC, name)


def decompose(name: str) -> str:
    """Return the canonical decomposition (NFD) of name."""
    return unicodedata.normalize(NFD, name)


def is_decomposed(name: str) -> bool:
    """
    True iff name is stored in decomposed form.

    The name must equal its own canonical decomposition, scalar for scalar,
    and must contain something that composition would change. Plain ASCII
    names equal their decomposition too, but they are already composed and
    are not reported as NFD.

    Args:
        name: A single filename (not a path)

    Returns:
        True if the name is NFD and would change under NFC
    """
    if name != decompose(name):
        return False
    return name != compose(name)


def normalization_form(name: str) -> NormalizationForm:
    return NFD if is_decomposed(name) else NFC


def decomposed_breakdown(name: str) -> str:
    """
    Space-separated listing of the decomposed scalars of name.

    "café" in either form gives "c a f e" followed by U+0301, the combining
    accent listed as its own scalar. Display only.
    """
    return " ".join(decompose(name))


def scalar_codes(name: str) -> str:
    """Space-separated U+XXXX listing of the scalars of name, as stored."""
    return " ".join(f"U+{ord(ch):04X}" for ch in name)


def normalization_label(name: str) -> str:
    """Display label: "NFC", or "NFD: " followed by the scalar breakdown."""
    if is_decomposed(name):
        return f"{NFD}: {decomposed_breakdown(name)}"
    return NFC


def display_text(text: str) -> str:
    """
    Printable form of a filename or path for terminals and JSON.

    On POSIX, bytes that are not valid UTF-8 come back from os.scandir as
    lone surrogates (surrogateescape). Those bytes are shown as backslash
    escapes; everything else passes through unchanged.
    """
    try:
        raw = os.fsencode(text)
    except UnicodeEncodeError:
        # surrogates that did not come from undecodable bytes
        return text.encode("utf-8", "backslashreplace").decode("utf-8")
    return raw.decode("utf-8", "backslashreplace")
