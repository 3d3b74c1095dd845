"""Game layer: a board played forward move by move.

Quick start::

    from rankfile.game import Game

    game = Game()
    game.apply_move("e4")
    game.apply_move("c5")
    print(game.get_fen())
"""

from rankfile.game.game import Game, GameConfig

__all__ = ["Game", "GameConfig"]
