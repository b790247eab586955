"""
Tictac - Configurable-Size Tic-Tac-Toe Rules Engine

A deterministic rules engine for tic-tac-toe on N x N boards.
The engine owns the game and exposes a narrow query/command surface:
- Board state and move legality
- Win/draw detection for variable board sizes
- Per-session score and match history bookkeeping
- A REST API and terminal client over the same controller
"""

__version__ = "0.1.0"
