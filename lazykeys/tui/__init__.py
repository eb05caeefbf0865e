"""Interactive Textual cheatsheet."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover
    from lazykeys.tui.app import CheatsheetApp as CheatsheetApp
    from lazykeys.tui.app import run as run
    from lazykeys.tui.session import CheatsheetSession as CheatsheetSession

__all__ = ["CheatsheetApp", "CheatsheetSession", "run"]


def __getattr__(name: str) -> Any:
    if name not in __all__:
        raise AttributeError(name)
    if name == "CheatsheetSession":
        from lazykeys.tui.session import CheatsheetSession

        return CheatsheetSession
    from lazykeys.tui.app import CheatsheetApp, run

    return {"CheatsheetApp": CheatsheetApp, "run": run}[name]
