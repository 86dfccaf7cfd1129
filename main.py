"""
Console driver for the TicTacToe engine.

Replays a script of commands against a fresh engine and prints the
board as it goes. Each command is one of:
- row,col       place the current player's mark (e.g. 1,1)
- reset         start a new round, keeping the score
- reset-score   zero the score and start a new round

Example:
    python main.py 0,0 1,0 0,1 1,1 0,2 reset 1,1
"""

import argparse
from typing import List, Optional, Tuple

from tictactoe.config import GameConfig
from tictactoe.logging_config import setup_logging
from tictactoe.logic import GameEngine, GameState, GameStatus

RESET_ROUND = "reset"
RESET_SCORE = "reset-score"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

Command = Tuple[str, Optional[Tuple[int, int]]]


def parse_command(text: str) -> Command:
    """
    Parse one script token.

    Args:
        text: "row,col", "reset" or "reset-score".

    Returns:
        ("move", (row, col)) or (command, None).

    Raises:
        argparse.ArgumentTypeError: If the token is not a command or the
            coordinates are off the board.
    """
    token = text.strip().lower()
    if token in (RESET_ROUND, RESET_SCORE):
        return token, None

    parts = token.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(
            f"'{text}' is not a move (row,col) or one of: {RESET_ROUND}, {RESET_SCORE}"
        )

    try:
        row, col = int(parts[0]), int(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{text}' has non-numeric coordinates") from None

    size = GameConfig.BOARD_SIZE
    if not (0 <= row < size and 0 <= col < size):
        raise argparse.ArgumentTypeError(
            f"'{text}' is off the board. Row and column must be 0-{size - 1}."
        )

    return "move", (row, col)


class ConsoleGame:
    """
    Feeds commands to a GameEngine and reports what happened.
    """

    def __init__(self, engine: Optional[GameEngine] = None, quiet: bool = False):
        """
        Initialize the console game.

        Args:
            engine: Engine to drive. A new one is created if not given.
            quiet: If True, only the final summary is printed.
        """
        self.engine = engine if engine is not None else GameEngine()
        self.quiet = quiet
        self.rejected_moves = 0

    def _say(self, text: str = ""):
        if not self.quiet:
            print(text)

    def run(self, commands: List[Command]) -> GameState:
        """
        Run every command in order.

        Args:
            commands: Parsed commands (see parse_command).

        Returns:
            The final game state.
        """
        for name, position in commands:
            if name == RESET_ROUND:
                self.engine.reset_round()
                self._say("\nNew round! X to move.")
            elif name == RESET_SCORE:
                self.engine.reset_score()
                self._say("\nScores reset! X to move.")
            else:
                self._play(*position)

        state = self.engine.get_state()
        print("\n" + "=" * 40)
        print(state.render())
        print("=" * 40)
        return state

    def _play(self, row: int, col: int):
        """Play one move and print the outcome."""
        player = self.engine.get_state().current_player
        result = self.engine.validate_move(row, col)

        if not self.engine.make_move(row, col):
            self.rejected_moves += 1
            self._say(f"\nWARNING: {player.symbol} at ({row}, {col}) rejected. {result.error_message}")
            return

        state = self.engine.get_state()
        self._say(f"\n>>> {player.symbol} plays ({row}, {col})")
        self._say(state.board.render())

        if state.status == GameStatus.WON:
            cells = ", ".join(f"({r}, {c})" for r, c in state.winning_line.cells())
            self._say(f"\n{state.winner.symbol} WINS! Line: {cells}")
            self._say(f"Score  X: {state.score_x}  O: {state.score_o}")
        elif state.status == GameStatus.DRAWN:
            self._say("\nIt's a DRAW!")
            self._say(f"Score  X: {state.score_x}  O: {state.score_o}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Replay a TicTacToe game script")
    parser.add_argument(
        "commands",
        nargs="*",
        type=parse_command,
        metavar="COMMAND",
        help=f"Moves as row,col, or '{RESET_ROUND}' / '{RESET_SCORE}'"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only print the final state"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=GameConfig.LOG_LEVEL,
        help="Logging level"
    )
    parser.add_argument(
        "--log-format",
        choices=sorted(GameConfig.LOG_FORMATS),
        default=GameConfig.LOG_FORMAT,
        help="Log line layout"
    )

    args = parser.parse_args(argv)
    setup_logging(level=args.log_level, format_style=args.log_format)

    game = ConsoleGame(quiet=args.quiet)
    game.run(args.commands)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
