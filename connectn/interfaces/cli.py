"""
cli.py - Command-line interface for Connect N

This module provides a CLI for playing two-player games in the terminal, listing the
game presets, analyzing board positions and benchmarking the game core.
"""

import argparse
import random
import sys
from typing import List, Optional

from connectn.debug import debug, DebugLevel
from connectn.exceptions import ColumnFullError, ConnectNError
from connectn.game.board import Board
from connectn.game.rules import ConnectNGame, get_preset
from connectn.interfaces.render import CLEAR_SCREEN, player_label, render_board
from connectn.utils import Cell, DEFAULT_PRESET, GameResult, PRESETS

TITLE = "Connect Four And More :)"

# Special return codes from get_human_move
QUIT = -1
RESTART = -3


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


class SimpleCLI:
    """Simple command-line interface for Connect N."""

    def __init__(self, argv: Optional[List[str]] = None):
        """Initialize the CLI."""
        self.argv = argv
        self.args = None
        self.color = True

    def build_parser(self) -> argparse.ArgumentParser:
        logging_options = argparse.ArgumentParser(add_help=False)
        logging_options.add_argument('--debug', action='store_true',
                                     help='Enable debug mode (equivalent to --debug-level debug)')
        logging_options.add_argument('--debug-level',
                                     choices=[level.name.lower() for level in DebugLevel],
                                     default='warning',
                                     help='Set debug level: none (silent) ... trace (most verbose)')
        logging_options.add_argument('--log-file', type=str, help='Also write log messages to this file')

        size_options = argparse.ArgumentParser(add_help=False)
        size_options.add_argument('--preset', choices=sorted(PRESETS),
                                  help='Game type providing board size and win length')
        size_options.add_argument('--width', type=int, help='Number of columns')
        size_options.add_argument('--height', type=int, help='Number of rows')
        size_options.add_argument('--win-length', type=int, help='Tokens in a row needed to win')

        parser = argparse.ArgumentParser(description='Connect N: Connect Four on any board size')
        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', parents=[logging_options, size_options],
                                            help='Play a two-player game interactively')
        play_parser.add_argument('--no-color', action='store_true',
                                 help='Plain output without colours or screen clearing')

        subparsers.add_parser('presets', parents=[logging_options], help='List the game types')

        test_parser = subparsers.add_parser('test', parents=[logging_options, size_options],
                                            help='Analyze a board position')
        test_parser.add_argument('--position', type=str, required=True,
                                 help='Comma-separated cell values (0 empty, 1 X, 2 O), top row first')

        benchmark_parser = subparsers.add_parser('benchmark', parents=[logging_options, size_options],
                                                 help='Benchmark performance')
        benchmark_parser.add_argument('--iterations', type=positive_int, default=1000,
                                      help='Number of iterations for benchmarking')
        return parser

    def parse_args(self) -> None:
        """Parse command-line arguments and configure logging."""
        self.args = self.build_parser().parse_args(self.argv)

        if getattr(self.args, 'debug', False):
            debug.configure(level=DebugLevel.DEBUG)
        elif getattr(self.args, 'debug_level', None):
            debug.set_from_string(self.args.debug_level)
        if getattr(self.args, 'log_file', None):
            debug.configure(log_file=self.args.log_file)

        self.color = not getattr(self.args, 'no_color', False)

    def run(self) -> int:
        """Run the CLI based on the parsed arguments."""
        if not self.args:
            self.parse_args()

        commands = {
            'play': self.play_game,
            'presets': self.list_presets,
            'test': self.test_position,
            'benchmark': self.benchmark,
        }
        if self.args.command not in commands:
            print("Please specify a command. Use --help for options.")
            return 1

        try:
            commands[self.args.command]()
        except ConnectNError as e:
            debug.error(str(e), "cli")
            print(f"Error: {e}")
            return 1
        except (KeyboardInterrupt, EOFError):
            print("\nGoodbye.")
        return 0

    def _size_requested(self) -> bool:
        return any(getattr(self.args, name, None) is not None
                   for name in ('preset', 'width', 'height', 'win_length'))

    def game_from_args(self) -> ConnectNGame:
        """Build a game from --preset and explicit size options (explicit options win)."""
        preset = get_preset(self.args.preset or DEFAULT_PRESET)
        return ConnectNGame(
            self.args.width if self.args.width is not None else preset.width,
            self.args.height if self.args.height is not None else preset.height,
            self.args.win_length if self.args.win_length is not None else preset.win_length,
        )

    def list_presets(self) -> None:
        """Print the available game types."""
        print("Game types: ")
        for name, preset in PRESETS.items():
            print(f"  - {name}: {preset.describe()}")

    def select_preset(self) -> ConnectNGame:
        """Show the welcome menu and ask for a game type until a known one is entered."""
        print(f"Welcome to {TITLE}")
        print()
        self.list_presets()
        print()
        choices = ", ".join(PRESETS)
        while True:
            name = input(f"Select game type ({choices}): ").strip().lower()
            if name in PRESETS:
                debug.debug(f"Selected game type {name}", "cli")
                return ConnectNGame.from_preset(name)

    def play_game(self, game: Optional[ConnectNGame] = None) -> GameResult:
        """Play a game of Connect N interactively."""
        if game is None:
            game = self.game_from_args() if self._size_requested() else self.select_preset()

        message = ""
        while True:
            if self.color:
                print(CLEAR_SCREEN, end="")
            print(TITLE)
            print(render_board(game.board, color=self.color))
            if message:
                print(message)
                message = ""

            if game.winner is not None:
                print(f"{player_label(game.winner)} won the game!")
                return game.result
            if game.result == GameResult.DRAW:
                print("Tie!")
                return game.result

            move = self.get_human_move(game)
            if move == QUIT:
                print("Quitting game.")
                return game.result
            if move == RESTART:
                game.reset()
                message = "Game restarted."
                continue

            try:
                game.apply_move(move)
            except ColumnFullError as e:
                message = f"{e}, choose another column."

    def get_human_move(self, game: ConnectNGame) -> int:
        """
        Get a move from the player to move.

        Returns:
            Column index in range for the board, or QUIT / RESTART
        """
        label = player_label(game.current_player())
        while True:
            user_input = input(f"{label}: Enter move (column number, q/r): ").strip().lower()

            # Check for special commands
            if user_input == 'q':
                return QUIT
            elif user_input == 'r':
                return RESTART

            try:
                move = int(user_input)
            except ValueError:
                continue
            if 0 <= move < game.width:
                return move
            print(f"Column must be between 0 and {game.width - 1}.")

    def test_position(self) -> None:
        """Analyze a board position given on the command line."""
        game = self.game_from_args()
        try:
            values = [int(v) for v in self.args.position.split(',')]
        except ValueError:
            print(f"Error parsing position: {self.args.position!r}")
            return
        if len(values) != game.width * game.height:
            print(f"Position string must have {game.width * game.height} values, got {len(values)}")
            return

        rows = [values[r * game.width:(r + 1) * game.width] for r in range(game.height)]
        try:
            board = Board.from_grid(rows)
        except ValueError as e:
            print(f"Error parsing position: {e}")
            return
        game = ConnectNGame.from_board(board, game.win_length)

        print("Loaded position:")
        print(render_board(game.board, color=False))

        if game.winner is not None:
            print(f"Win for {player_label(game.winner)} at {game.winning_line()}")
        else:
            print("No win detected for any player")

        if game.is_full():
            print("Board is full")
        else:
            print(f"Empty spaces: {game.board.count(Cell.EMPTY)}")
            print(f"Next to move: {player_label(game.current_player())}")
        print(f"Valid moves: {game.get_valid_moves()}")

    def benchmark(self) -> None:
        """Benchmark the performance of the game core."""
        iterations = self.args.iterations
        template = self.game_from_args()
        width, height, win_length = template.width, template.height, template.win_length
        print(f"Running benchmark on a {width}x{height} board (win length {win_length}) "
              f"with {iterations} iterations...")

        debug.start_timer("board_init")
        for _ in range(iterations):
            Board(width, height)
        elapsed = debug.end_timer("board_init", "cli")
        print(f"Board initialization: {elapsed:.6f} seconds total, "
              f"{elapsed / iterations * 1000:.6f} ms per board")

        games_played = 0
        total_moves = 0
        debug.start_timer("game_simulation")
        for _ in range(max(1, iterations // 10)):
            game = ConnectNGame(width, height, win_length)
            while not game.is_game_over():
                game.apply_move(random.choice(game.get_valid_moves()))
                total_moves += 1
            games_played += 1
        elapsed = debug.end_timer("game_simulation", "cli")
        print(f"Played {games_played} games with {total_moves} total moves: "
              f"{elapsed:.6f} seconds total, {elapsed / games_played * 1000:.6f} ms per game, "
              f"{elapsed / total_moves * 1000:.6f} ms per move")

        debug.start_timer("win_check")
        for _ in range(iterations):
            game.has_winner()
        elapsed = debug.end_timer("win_check", "cli")
        print(f"Performing {iterations} win scans: {elapsed:.6f} seconds total, "
              f"{elapsed / iterations * 1000:.6f} ms per scan")

        debug.start_timer("rendering")
        for _ in range(iterations):
            render_board(game.board)
        elapsed = debug.end_timer("rendering", "cli")
        print(f"Rendering board {iterations} times: {elapsed:.6f} seconds total, "
              f"{elapsed / iterations * 1000:.6f} ms per render")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI(argv)
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
