"""
Unit tests for the command line driver.
"""
import pytest
from minefield import BoardConfig, GameSession
from minefield.cli import main, record_win, run_commands


@pytest.fixture
def output() -> list:
    return []


class TestRunCommands:
    """Test text command handling."""

    def test_reveal_to_win(
        self, corner_mine_session: GameSession, output: list
    ) -> None:
        assert run_commands(corner_mine_session, ["r 0 0"], output.append) is True
        assert output[-1] == "You cleared the board!"

    def test_reveal_mine_loses(
        self, corner_mine_session: GameSession, output: list
    ) -> None:
        assert run_commands(corner_mine_session, ["r 2 2"], output.append) is False
        assert "BOOM" in output[-1]

    def test_bad_commands_print_help(
        self, corner_mine_session: GameSession, output: list
    ) -> None:
        result = run_commands(
            corner_mine_session, ["", "x", "r 1", "r a b"], output.append
        )
        assert result is None
        assert len(output) == 3
        assert all(line.startswith("Commands:") for line in output)

    def test_flag_blocks_reveal(
        self, corner_mine_session: GameSession, output: list
    ) -> None:
        result = run_commands(
            corner_mine_session, ["f 2 2", "r 2 2"], output.append
        )
        assert result is None
        assert "Mines left: 0" in output

    def test_chord_command(self, two_mine_session: GameSession, output: list) -> None:
        commands = ["r 1 1", "f 0 0", "f 0 2", "c 1 1"]
        assert run_commands(two_mine_session, commands, output.append) is True

    def test_quit(self, corner_mine_session: GameSession, output: list) -> None:
        assert run_commands(corner_mine_session, ["q", "r 0 0"], output.append) is None
        assert corner_mine_session.revealed_count == 0


class TestRecordWin:
    """Test best time bookkeeping."""

    def test_first_win_sets_best(self) -> None:
        session = GameSession.from_config(BoardConfig(3, 3, 1))
        session.current_player = "ada"
        session.current_time_in_seconds = 30
        record_win(session)
        assert session.best_time_in_seconds == 30
        assert session.best_player == "ada"

    def test_slower_win_keeps_best(self) -> None:
        session = GameSession.from_config(BoardConfig(3, 3, 1))
        session.best_time_in_seconds = 10
        session.best_player = "grace"
        session.current_player = "ada"
        session.current_time_in_seconds = 30
        record_win(session)
        assert session.best_time_in_seconds == 10
        assert session.best_player == "grace"


class TestMain:
    """Test the argument parser entry point."""

    def test_simulate(self, capsys) -> None:
        argv = ["simulate", "--games", "3", "--width", "5", "--height", "5",
                "--mines", "3", "--seed", "1"]
        assert main(argv) == 0
        assert "Random agent:" in capsys.readouterr().out

    def test_invalid_mine_count_exits(self) -> None:
        with pytest.raises(SystemExit):
            main(["simulate", "--width", "3", "--height", "3", "--mines", "9"])

    @pytest.mark.parametrize(
        "option", [["--mines", "0"], ["--width", "0"], ["--height", "0"]]
    )
    def test_explicit_zero_is_rejected(self, option: list) -> None:
        """Zero is an invalid value, not a missing option."""
        with pytest.raises(SystemExit):
            main(["simulate", "--games", "1", "--seed", "1", *option])

    def test_partial_override_keeps_preset_values(self, capsys) -> None:
        argv = ["simulate", "--games", "1", "--difficulty", "beginner",
                "--mines", "5", "--seed", "1"]
        assert main(argv) == 0
        assert "Random agent:" in capsys.readouterr().out

    def test_unknown_difficulty_exits(self) -> None:
        with pytest.raises(SystemExit):
            main(["simulate", "--difficulty", "impossible"])
