class GameError(Exception):
    """
    base for errors a caller can expect from normal play
    """


class InvalidArgumentError(GameError, ValueError):
    """
    row, column or player outside its allowed values
    """


class IllegalMoveError(GameError):
    """
    target cell is already taken
    """


class InvalidStateError(GameError):
    """
    move or player lookup after the game has ended
    """


class BoardInvariantError(RuntimeError):
    """
    grid holds a value that can't be there (corrupted board)
    kept outside GameError so move handlers never catch it
    """
