from enum import IntEnum

from .errors import (
    BoardInvariantError, IllegalMoveError,
    InvalidArgumentError, InvalidStateError
)

BOARD_SIZE = 3                 # fixed 3x3 grid
PLAYER_NUMBERS = (1, 2)


class CellValue(IntEnum):
    EMPTY = 0
    PLAYER_ONE = 1
    PLAYER_TWO = 2


class BoardStatus(IntEnum):
    PLAYING = 0
    PLAYER_ONE_WIN = 1
    PLAYER_TWO_WIN = 2
    TIE = 3


class GameStatus(IntEnum):
    PLAYER_ONE_TURN = 1
    PLAYER_TWO_TURN = 2
    PLAYER_ONE_WIN = 3
    PLAYER_TWO_WIN = 4
    TIE = 5

    @property
    def is_over(self):
        return self in (GameStatus.PLAYER_ONE_WIN,
                        GameStatus.PLAYER_TWO_WIN, GameStatus.TIE)


def _build_win_lines():
    """
    columns, then rows, then the two diagonals
    """
    n = BOARD_SIZE
    columns = [tuple((r, c) for r in range(n)) for c in range(n)]
    rows = [tuple((r, c) for c in range(n)) for r in range(n)]
    diagonals = [tuple((i, i) for i in range(n)),
                 tuple((i, n - 1 - i) for i in range(n))]
    return tuple(columns + rows + diagonals)


WIN_LINES = _build_win_lines()

# winning cell value -> board status
_WINNER_STATUS = {
    CellValue.PLAYER_ONE: BoardStatus.PLAYER_ONE_WIN,
    CellValue.PLAYER_TWO: BoardStatus.PLAYER_TWO_WIN,
}

# board status -> game status, for the terminal ones
_TERMINAL_STATUS = {
    BoardStatus.PLAYER_ONE_WIN: GameStatus.PLAYER_ONE_WIN,
    BoardStatus.PLAYER_TWO_WIN: GameStatus.PLAYER_TWO_WIN,
    BoardStatus.TIE: GameStatus.TIE,
}

_CELL_CHARS = {CellValue.EMPTY: '.', CellValue.PLAYER_ONE: 'O',
               CellValue.PLAYER_TWO: 'X'}


def _check_number(value, allowed, what):
    # bool is an int subclass, 1.0 == 1; both are rejected
    if isinstance(value, bool) or not isinstance(value, int) \
       or value not in allowed:
        choices = ", ".join(str(a) for a in allowed)
        raise InvalidArgumentError(
            f"{what} should be one of {choices}, got {value!r}")


class Gameboard:
    """
    3x3 grid of cell values: validates and applies moves,
    works out win/tie from the win lines
    """
    def __init__(self):
        self._board = [[CellValue.EMPTY for _ in range(BOARD_SIZE)]
                       for _ in range(BOARD_SIZE)]

    def board(self):
        """
        deep copy of the grid, safe for callers to mutate
        """
        return [list(row) for row in self._board]

    def place_move(self, row, column, player):
        """
        put player 1 or 2 on an empty cell
        raises InvalidArgumentError / IllegalMoveError, grid untouched on error
        """
        _check_number(row, range(BOARD_SIZE), "row")
        _check_number(column, range(BOARD_SIZE), "column")
        _check_number(player, PLAYER_NUMBERS, "player")
        if self._board[row][column] != CellValue.EMPTY:
            raise IllegalMoveError(
                f"cell ({row}, {column}) is already taken")
        self._board[row][column] = (CellValue.PLAYER_ONE if player == 1
                                    else CellValue.PLAYER_TWO)

    def _value_of(self, cell):
        row, column = cell
        return self._board[row][column]

    def winning_line(self):
        """
        first fully matched win line, or None
        """
        for line in WIN_LINES:
            value = self._value_of(line[0])
            if value != CellValue.EMPTY and \
               all(self._value_of(cell) == value for cell in line):
                return line
        return None

    def get_board_status(self):
        """
        scan win lines in order; no winner + full board is a tie
        """
        line = self.winning_line()
        if line is not None:
            value = self._value_of(line[0])
            try:
                return _WINNER_STATUS[value]
            except KeyError:
                raise BoardInvariantError(
                    f"invalid cell value {value!r} on line {line}") from None
        if self.empty_cells():
            return BoardStatus.PLAYING
        return BoardStatus.TIE

    def empty_cells(self):
        """
        empty coords, row-major
        """
        return [(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)
                if self._board[r][c] == CellValue.EMPTY]

    def __str__(self):
        return "\n".join("".join(_CELL_CHARS.get(v, '?') for v in row)
                         for row in self._board)


class Player:
    """
    fixed player number bound to the current board
    """
    def __init__(self, number, board):
        _check_number(number, PLAYER_NUMBERS, "player")
        self._number = number
        self._board = board

    @property
    def number(self):
        return self._number

    def make_move(self, row, column):
        # board does the checking, errors go straight up
        self._board.place_move(row, column, self._number)

    def replace_board_with(self, new_board):
        self._board = new_board

    def __repr__(self):
        return f"Player({self._number})"


class Game:
    """
    turn state machine on top of one gameboard and two players
    """
    def __init__(self):
        self.reset()

    def status(self):
        return self._status

    def board(self):
        return self._board.board()

    def winning_line(self):
        return self._board.winning_line()

    def move_count(self):
        return self._move_count

    def reset(self):
        """
        fresh board, fresh players, player one to move
        """
        self._board = Gameboard()
        self._player1 = Player(1, self._board)
        self._player2 = Player(2, self._board)
        self._status = GameStatus.PLAYER_ONE_TURN
        self._move_count = 0

    def current_player(self):
        if self._status == GameStatus.PLAYER_ONE_TURN:
            return self._player1
        if self._status == GameStatus.PLAYER_TWO_TURN:
            return self._player2
        raise InvalidStateError(
            f"game already ended ({self._status.name.lower()})")

    def make_move(self, row, column):
        """
        play (row, column) for whoever's turn it is
        status only changes if the move went through
        """
        player = self.current_player()
        player.make_move(row, column)
        self._move_count += 1
        self._update_game_status()

    def _update_game_status(self):
        board_status = self._board.get_board_status()
        if board_status == BoardStatus.PLAYING:
            # flip turn
            self._status = (GameStatus.PLAYER_TWO_TURN
                            if self._status == GameStatus.PLAYER_ONE_TURN
                            else GameStatus.PLAYER_ONE_TURN)
        else:
            self._status = _TERMINAL_STATUS[board_status]
