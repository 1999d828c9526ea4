from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class PlotClause:
    """
    One series of a plot statement, ready to be emitted.

    ``axes`` maps an axis name to the scratch-file column holding its data and
    drives auto-ranging.  ``preamble`` holds commands that must precede the
    statement opened by this clause; ``epilogue`` holds the commands that undo
    them once that statement has ended.
    """

    body: str
    axes: dict[str, int] = field(default_factory=dict)
    preamble: list[str] = field(default_factory=list)
    epilogue: list[str] = field(default_factory=list)
