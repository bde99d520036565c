"""Build-time configuration for calcdemo.

Defines are read from CALCDEMO_DEFINES exactly once, when this module is first
imported, and frozen into BUILD. Nothing downstream looks at the environment
again, so the selection behaves like a compiled-in -D switch.
"""

from __future__ import annotations

import os
import re
from typing import Mapping, Optional

from rich.console import Console

from calcdemo.models import BuildConfig, Variant

DEFINES_VAR = "CALCDEMO_DEFINES"

PRINTHELLO = "PRINTHELLO"
PRINTBYE = "PRINTBYE"
NAMEDCONSTANTS = "NAMEDCONSTANTS"

KNOWN_DEFINES = frozenset({PRINTHELLO, PRINTBYE, NAMEDCONSTANTS})

# Names may be separated by commas, whitespace, or both.
_SPLIT_RE = re.compile(r"[\s,]+")


def parse_defines(raw: str, console: Optional[Console] = None) -> frozenset[str]:
    """Split a defines string into the set of recognised names.

    Accepts the compiler forms ``-DNAME``, ``-D NAME`` and ``NAME=value`` and
    ignores case. A value never changes the meaning: a name is either defined
    or not. Unknown names are reported on the console and dropped.

    Args:
        raw: Value of CALCDEMO_DEFINES (e.g., "-DPRINTHELLO, NAMEDCONSTANTS").
        console: Where to report unknown names. Defaults to stderr.

    Returns:
        Frozen set of upper-cased, recognised define names.
    """
    names = set()
    for token in _SPLIT_RE.split(raw.strip()):
        if not token or token in ("-D", "-d"):
            continue
        name = token[2:] if token[:2] in ("-D", "-d") else token
        name = name.partition("=")[0].upper()
        if name not in KNOWN_DEFINES:
            console = console or Console(stderr=True)
            console.print(f"[yellow]Ignoring unknown build define: {token}[/yellow]")
            continue
        names.add(name)
    return frozenset(names)


def resolve_build(defines: frozenset[str]) -> BuildConfig:
    """Turn a set of define names into a BuildConfig.

    PRINTHELLO wins over PRINTBYE when both are present.
    """
    if PRINTHELLO in defines:
        variant = Variant.HELLO
    elif PRINTBYE in defines:
        variant = Variant.BYE
    else:
        variant = Variant.DEFAULT
    return BuildConfig(
        variant=variant,
        named_constants=NAMEDCONSTANTS in defines,
    )


def load_build_config(
    env: Optional[Mapping[str, str]] = None,
    console: Optional[Console] = None,
) -> BuildConfig:
    """Read CALCDEMO_DEFINES from env (default os.environ) and resolve it."""
    env = os.environ if env is None else env
    return resolve_build(parse_defines(env.get(DEFINES_VAR, ""), console))


BUILD = load_build_config()
