"""Rendering subpackage.

Turns immutable ``State`` snapshots into terminal text: the board grid with
coordinate rulers, a status line naming the active actor (or the outcome),
and the list of cells the active actor may target.

Renderers only read state through :mod:`tres_uno_dos.utils.board` and the
``State`` properties; they never change it. See
:mod:`tres_uno_dos.renderer.text`.
"""

from .text import TextRenderer, render

__all__ = ["TextRenderer", "render"]
