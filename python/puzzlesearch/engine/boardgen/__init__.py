from puzzlesearch.engine.boardgen.generator import BoardGenerator

random_board = BoardGenerator.random_board
scramble = BoardGenerator.scramble
is_solvable = BoardGenerator.is_solvable

__all__ = ["BoardGenerator", "is_solvable", "random_board", "scramble"]
