#===============================================================================
#  LaunchGrid | text.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Accent-insensitive text helpers used by the search filter.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import re
import unicodedata

# Combining Diacritical Marks block
STRIP_ACCENT_RE = re.compile(r"[\u0300-\u036f]+")


def strip_accents(s: str) -> str:
    """Decompose (NFD) and drop combining diacritical marks. 'Café' -> 'Cafe'."""
    return STRIP_ACCENT_RE.sub("", unicodedata.normalize("NFD", s))


def contains_ignore_accents(haystack: str, needle: str) -> bool:
    """Case and accent insensitive substring test. An empty needle always matches."""
    return strip_accents(needle.casefold()) in strip_accents(haystack.casefold())
