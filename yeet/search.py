#===============================================================================
#  Yeet | search.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Simple query filter for the picker: word match on the app's search text,
#  recently launched apps first.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from .models import App


def matches(app: App, words: Sequence[str]) -> bool:
    text = app.search_text().lower()
    return all(w in text for w in words)


def filter_apps(
    apps: Sequence[App],
    query: str,
    history: Dict[str, int],
    limit: Optional[int] = None,
) -> List[App]:
    """Apps matching every word of `query`, most recently launched first.

    Never-launched apps keep their catalog order after the launched ones.
    """
    words = query.lower().split()
    found = [a for a in apps if matches(a, words)]
    found.sort(key=lambda a: -history.get(a.name, -1))
    if limit is not None:
        found = found[:limit]
    return found
