#===============================================================================
#  Yeet | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-10-17
#  Last Update : 2026-10-17
#
#  Summary
#  -------
#  Shared data models used across the launcher: apps, custom apps and the two
#  launch strategies.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import shlex
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from .constants import SHELL
from .errors import InvalidInput


@dataclass(frozen=True)
class Direct:
    """Run argv[0] with the remaining arguments, no shell involved."""
    argv: Tuple[str, ...]

    def spawn_argv(self, terminal: Optional[str] = None) -> List[str]:
        if not self.argv:
            raise InvalidInput("cannot launch an empty argv")
        if terminal is None:
            return list(self.argv)
        try:
            wrapper = shlex.split(terminal)
        except ValueError as e:
            raise InvalidInput(f"bad terminal command {terminal!r}: {e}") from e
        if not wrapper:
            raise InvalidInput("terminal command is empty")
        return wrapper + ["-e", *self.argv]


@dataclass(frozen=True)
class ShellLine:
    """Hand an opaque command string to `sh -c`. Only used for user-configured apps."""
    command: str

    def spawn_argv(self, terminal: Optional[str] = None) -> List[str]:
        if terminal is None:
            return [SHELL, "-c", self.command]
        return [SHELL, "-c", f"{terminal} -e {self.command}"]


LaunchStrategy = Union[Direct, ShellLine]


@dataclass(frozen=True)
class App:
    """A launchable application, either discovered or user-configured."""
    name: str                   # display identity; favorites/exclude key
    exec: str                   # cleaned command line, display only
    launch_strategy: LaunchStrategy
    icon: Optional[str] = None
    description: Optional[str] = None
    keywords: Tuple[str, ...] = ()
    runs_in_terminal: bool = False

    def search_text(self) -> str:
        parts = [self.name]
        if self.description:
            parts.append(self.description)
        parts.extend(self.keywords)
        return " ".join(parts)


@dataclass(frozen=True)
class CustomApp:
    """An app defined in the [[apps.custom]] config table."""
    name: str
    exec: str
    icon: Optional[str] = None
    keywords: Tuple[str, ...] = ()
