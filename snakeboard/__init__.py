"""Snake game on plain-text boards: cell rules, game state, food placement and two commands."""

__version__ = "0.1.0"
__all__ = ["cells", "state", "utils", "cli", "interactive"]