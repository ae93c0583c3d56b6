import pytest

from connectn.interfaces.cli import SimpleCLI, main
from connectn.utils import GameResult


@pytest.fixture
def scripted_input(monkeypatch):
    def script(*answers):
        answers = iter(answers)

        def fake_input(prompt=""):
            try:
                return next(answers)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr("builtins.input", fake_input)
    return script


def test_presets(capsys):
    assert main(['presets']) == 0
    out = capsys.readouterr().out
    assert "tiny: 5 x 5 board, win length of 3" in out
    assert "regular: 7 x 6 board, win length of 4" in out
    assert "big: 12 x 9 board, win length of 5" in out


def test_no_command(capsys):
    assert main([]) == 1
    assert "Please specify a command" in capsys.readouterr().out


def test_play_until_win(scripted_input, capsys):
    scripted_input('0', '0', '1', '1', '2')
    assert main(['play', '--preset', 'tiny', '--no-color']) == 0
    out = capsys.readouterr().out
    assert "X won the game!" in out
    assert "\033[" not in out


def test_play_ignores_bad_input(scripted_input, capsys):
    scripted_input('abc', '9', '', '0', '1', '0', '1', '0')
    cli = SimpleCLI(['play', '--preset', 'tiny', '--no-color'])
    cli.parse_args()
    result = cli.play_game()
    out = capsys.readouterr().out
    assert result == GameResult.PLAYER_A_WIN
    assert "Column must be between 0 and 4." in out


def test_full_column_reprompts_without_losing_turn(scripted_input, capsys):
    scripted_input('0', '0', '0', '0', '0', '0', 'q')
    cli = SimpleCLI(['play', '--preset', 'tiny', '--no-color'])
    cli.parse_args()
    assert cli.play_game() == GameResult.IN_PROGRESS
    out = capsys.readouterr().out
    assert "Column 0 is full, choose another column." in out
    assert "Quitting game." in out


def test_win_length_longer_than_board_is_rejected(capsys):
    assert main(['play', '--width', '2', '--height', '2', '--win-length', '3', '--no-color']) == 1
    assert "Error:" in capsys.readouterr().out


def test_tie_on_wide_board(scripted_input, capsys):
    scripted_input('0', '1', '2', '3', '1', '0', '3', '2')
    assert main(['play', '--width', '4', '--height', '2', '--win-length', '3', '--no-color']) == 0
    assert "Tie!" in capsys.readouterr().out


def test_menu_selection(scripted_input, capsys):
    scripted_input('huge', 'tiny', 'q')
    assert main(['play', '--no-color']) == 0
    out = capsys.readouterr().out
    assert "Welcome to Connect Four And More :)" in out
    assert "0 1 2 3 4" in out
    assert "Quitting game." in out


def test_restart(scripted_input, capsys):
    scripted_input('0', 'r', 'q')
    cli = SimpleCLI(['play', '--preset', 'tiny', '--no-color'])
    cli.parse_args()
    assert cli.play_game() == GameResult.IN_PROGRESS
    assert "Game restarted." in capsys.readouterr().out


def test_colored_play_clears_screen(scripted_input, capsys):
    scripted_input('q')
    assert main(['play', '--preset', 'tiny']) == 0
    assert "\033[2J" in capsys.readouterr().out


def test_end_of_input_exits_cleanly(scripted_input, capsys):
    scripted_input()
    assert main(['play', '--preset', 'tiny', '--no-color']) == 0
    assert "Goodbye." in capsys.readouterr().out


def test_invalid_dimensions_reported(capsys):
    assert main(['play', '--width', '0', '--no-color']) == 1
    assert "Error:" in capsys.readouterr().out


def test_position_with_win(capsys):
    position = ",".join(["0"] * 20 + ["1", "1", "1", "2", "2"])
    assert main(['test', '--preset', 'tiny', '--position', position]) == 0
    out = capsys.readouterr().out
    assert "Win for X at [(4, 0), (4, 1), (4, 2)]" in out
    assert "Empty spaces: 20" in out


def test_position_without_win(capsys):
    position = ",".join(["0"] * 20 + ["1", "2", "1", "2", "0"])
    assert main(['test', '--preset', 'tiny', '--position', position]) == 0
    out = capsys.readouterr().out
    assert "No win detected for any player" in out
    assert "Next to move: X" in out
    assert "Valid moves: [0, 1, 2, 3, 4]" in out


def test_position_wrong_length(capsys):
    assert main(['test', '--preset', 'tiny', '--position', '0,1,2']) == 0
    assert "Position string must have 25 values, got 3" in capsys.readouterr().out


def test_position_bad_value(capsys):
    position = ",".join(["0"] * 24 + ["7"])
    assert main(['test', '--preset', 'tiny', '--position', position]) == 0
    assert "Error parsing position" in capsys.readouterr().out


def test_benchmark(capsys):
    assert main(['benchmark', '--preset', 'tiny', '--iterations', '10']) == 0
    out = capsys.readouterr().out
    assert "Played 1 games" in out
    assert "Rendering board 10 times" in out


@pytest.mark.parametrize("iterations", ["0", "-5", "many"])
def test_benchmark_rejects_bad_iteration_counts(iterations, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(['benchmark', '--preset', 'tiny', '--iterations', iterations])
    assert excinfo.value.code == 2
    captured = capsys.readouterr()
    assert "--iterations" in captured.err
    assert "Running benchmark" not in captured.out


def test_benchmark_single_iteration(capsys):
    assert main(['benchmark', '--preset', 'tiny', '--iterations', '1']) == 0
    assert "Performing 1 win scans" in capsys.readouterr().out
