#===============================================================================
#  LaunchGrid | ranking.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-18
#  Last Update : 2026-10-18
#
#  Summary
#  -------
#  Pure ranking/filtering of launch items: deprioritization, soft deletion,
#  search filter and usage-count ordering.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import dataclasses
from typing import AbstractSet, Iterable, List, Mapping

from .constants import DEPRIORITIZED
from .models import AppItem, LaunchItem


def _dedupe(items: Iterable[LaunchItem]) -> List[LaunchItem]:
    seen = set()
    out: List[LaunchItem] = []
    for item in items:
        if item.id in seen:
            continue
        seen.add(item.id)
        out.append(item)
    return out


def rank_launch_items(
    all_items: Iterable[LaunchItem],
    query: str,
    counters: Mapping[str, int],
    deleted_ids: AbstractSet[str],
) -> List[LaunchItem]:
    """Return the items to display, best first.

    Steps:
      1) apps whose counter holds the DEPRIORITIZED sentinel are flagged
      2) soft-deleted ids are dropped
      3) items not matching the trimmed query are dropped
      4) stable sort by launch count, descending (absent counter = 0)

    A deprioritized app therefore always ranks below untouched items, whatever
    its launch history was.
    """
    q = (query or "").strip()

    items = []
    for item in _dedupe(all_items):
        if isinstance(item, AppItem) and counters.get(item.id) == DEPRIORITIZED:
            item = dataclasses.replace(item, is_deprioritized=True)
        items.append(item)

    items = [i for i in items if i.id not in deleted_ids]
    items = [i for i in items if i.matches_filter(q)]

    # sorted() is stable, reverse=True included
    return sorted(items, key=lambda i: counters.get(i.id, 0), reverse=True)


def should_offer_web_search(results: List[LaunchItem]) -> bool:
    return not results
