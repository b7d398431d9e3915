#===============================================================================
#  Yeet | desktop_entry.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Reader for freedesktop .desktop files. Turns one file into raw fields
#  (localized name/comment with a single fallback locale, icon, Exec, keywords
#  and flags) and tokenizes the Exec key into an argv.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import configparser
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from .constants import DESKTOP_ENTRY_GROUP, FALLBACK_LOCALE, FIELD_CODES

log = logging.getLogger(__name__)

_ESCAPES = {"s": " ", "n": "\n", "t": "\t", "r": "\r", "\\": "\\"}
_LIST_ESCAPES = dict(_ESCAPES, **{";": ";"})
_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)
_LIST_SEPARATOR_RE = re.compile(r"(?<!\\);")
_PERCENT_RE = re.compile(r"%(.)", re.DOTALL)
_EXEC_WHITESPACE = " \t\n"
_DQUOTE_ESCAPABLE = "\"`$\\"


@dataclass(frozen=True)
class DesktopEntry:
    """Raw fields of one desktop entry, before any normalization."""
    path: Path
    name: Optional[str]
    exec: Optional[str]
    icon: Optional[str] = None
    description: Optional[str] = None
    keywords: Tuple[str, ...] = ()
    terminal: bool = False
    no_display: bool = False
    hidden: bool = False


def _unescape(value: str, table=_ESCAPES) -> str:
    # Unknown escapes are kept as written.
    return _ESCAPE_RE.sub(lambda m: table.get(m.group(1), m.group(0)), value)


def _string(section, key: str) -> Optional[str]:
    raw = section.get(key)
    if raw is None or not raw.strip():
        return None
    return _unescape(raw.strip())


def _localized(section, key: str, locale: str = FALLBACK_LOCALE) -> Optional[str]:
    return _string(section, f"{key}[{locale}]") or _string(section, key)


def _string_list(section, key: str, locale: str = FALLBACK_LOCALE) -> Tuple[str, ...]:
    raw = section.get(f"{key}[{locale}]") or section.get(key)
    if not raw:
        return ()
    items = (_unescape(part.strip(), _LIST_ESCAPES) for part in _LIST_SEPARATOR_RE.split(raw))
    return tuple(item for item in items if item)


def _boolean(section, key: str) -> bool:
    return (section.get(key) or "").strip().lower() == "true"


def parse_desktop_entry(text: str, path: Path) -> Optional[DesktopEntry]:
    """Parse the text of a .desktop file. Returns None if it is not a usable entry file."""
    parser = configparser.ConfigParser(
        interpolation=None,
        strict=False,
        delimiters=("=",),
        comment_prefixes=("#",),
        default_section="\0",  # desktop files have no DEFAULT group
    )
    parser.optionxform = str  # keys are case-sensitive
    try:
        parser.read_string(text, source=str(path))
    except configparser.Error as e:
        log.debug("Skipping %s: %s", path, e)
        return None

    if not parser.has_section(DESKTOP_ENTRY_GROUP):
        log.debug("Skipping %s: no [%s] group", path, DESKTOP_ENTRY_GROUP)
        return None

    sec = parser[DESKTOP_ENTRY_GROUP]
    return DesktopEntry(
        path=path,
        name=_localized(sec, "Name"),
        exec=_string(sec, "Exec"),
        icon=_string(sec, "Icon"),
        description=_localized(sec, "Comment"),
        keywords=_string_list(sec, "Keywords"),
        terminal=_boolean(sec, "Terminal"),
        no_display=_boolean(sec, "NoDisplay"),
        hidden=_boolean(sec, "Hidden"),
    )


def read_desktop_entry(path: Path) -> Optional[DesktopEntry]:
    """Read one .desktop file from disk. Unreadable files yield None."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        log.debug("Skipping %s: %s", path, e)
        return None
    return parse_desktop_entry(text, path)


def _resolve_percent(m: re.Match) -> str:
    code = m.group(1)
    if code == "%":
        return "%"
    if code in FIELD_CODES:
        return ""
    return m.group(0)


def _exec_tokens(exec_line: str) -> List[str]:
    """Split an Exec value on unquoted whitespace, applying its quoting rules.

    Single quotes are literal. Inside double quotes a backslash only escapes
    a double quote, backtick, dollar sign or backslash, and is kept before
    anything else. Outside quotes a backslash escapes the next character.
    """
    tokens: List[str] = []
    buf: List[str] = []
    in_token = False
    quote: Optional[str] = None
    chars = iter(exec_line)
    for ch in chars:
        if quote == "'":
            if ch == "'":
                quote = None
            else:
                buf.append(ch)
        elif quote == '"':
            if ch == '"':
                quote = None
            elif ch == "\\":
                nxt = next(chars, None)
                if nxt is None:
                    break
                buf.append(nxt if nxt in _DQUOTE_ESCAPABLE else "\\" + nxt)
            else:
                buf.append(ch)
        elif ch in _EXEC_WHITESPACE:
            if in_token:
                tokens.append("".join(buf))
                buf = []
                in_token = False
        else:
            in_token = True
            if ch == "\\":
                buf.append(next(chars, "\\"))
            elif ch in "'\"":
                quote = ch
            else:
                buf.append(ch)
    if quote is not None:
        raise ValueError(f"No closing quotation ({quote}) in Exec: {exec_line!r}")
    if in_token:
        tokens.append("".join(buf))
    return tokens


def split_exec(exec_line: str) -> List[str]:
    """Tokenize an Exec value into argv, dropping field codes.

    Arguments made only of field codes (e.g. ``%U``) disappear entirely;
    ``%%`` becomes a literal ``%``. Raises ValueError on unbalanced quotes.
    """
    argv: List[str] = []
    for token in _exec_tokens(exec_line):
        resolved = _PERCENT_RE.sub(_resolve_percent, token)
        if token and not resolved:
            continue
        argv.append(resolved)
    return argv
