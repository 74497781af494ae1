"""Qt adapters for the area controllers."""

from tictactoe.ui.qt_bridge import AreaSignals

__all__ = ["AreaSignals"]
