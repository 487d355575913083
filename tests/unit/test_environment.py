"""
Unit tests for the Gymnasium environment.
"""
import numpy as np
import pytest
from minesweeper import Board, BoardConfig, MinesweeperEnv


@pytest.fixture
def env() -> MinesweeperEnv:
    """Default 9x9 environment, already reset."""
    environment = MinesweeperEnv()
    environment.reset(seed=0)
    return environment


@pytest.fixture
def corner_env() -> MinesweeperEnv:
    """3x3 environment playing the single corner mine layout."""
    environment = MinesweeperEnv(BoardConfig(3, 3, 1), render_mode="ansi")
    environment.reset(seed=0)
    environment.board = Board.from_mines(3, 3, [(0, 0)])
    return environment


class TestSpaces:
    """Test observation and action spaces."""

    def test_action_space_has_reveal_and_flag(self, env: MinesweeperEnv) -> None:
        """One reveal and one flag action per cell."""
        assert env.action_space.n == 2 * 81

    def test_reset_observation(self, env: MinesweeperEnv) -> None:
        """Reset gives an all-hidden board inside the observation space."""
        obs, info = env.reset(seed=1)
        assert obs.shape == (9, 9)
        assert obs.dtype == np.int8
        assert np.all(obs == -1)
        assert env.observation_space.contains(obs)
        assert info["revealed"] == 0
        assert info["total_safe"] == 71
        assert info["game_state"] == "IN_PROGRESS"

    def test_seeded_reset_is_reproducible(self) -> None:
        """The same seed deals the same board."""
        first = MinesweeperEnv()
        second = MinesweeperEnv()
        first.reset(seed=21)
        second.reset(seed=21)
        for row in range(9):
            for col in range(9):
                assert (
                    first.board.get_cell(row, col).is_mine
                    == second.board.get_cell(row, col).is_mine
                )


class TestStep:
    """Test actions and rewards."""

    def test_step_before_reset_raises(self) -> None:
        """An environment needs a board first."""
        with pytest.raises(RuntimeError):
            MinesweeperEnv().step(0)

    def test_invalid_action_raises(self, env: MinesweeperEnv) -> None:
        """Actions outside the space are rejected."""
        with pytest.raises(ValueError):
            env.step(2 * 81)

    def test_winning_reveal(self, corner_env: MinesweeperEnv) -> None:
        """Flooding the whole board wins."""
        obs, reward, terminated, truncated, info = corner_env.step(8)
        assert reward == 10.0
        assert terminated is True
        assert truncated is False
        assert info["game_state"] == "WON"
        assert info["revealed"] == 8
        assert obs[2, 2] == 0

    def test_losing_reveal(self, corner_env: MinesweeperEnv) -> None:
        """Hitting the mine loses."""
        obs, reward, terminated, _, info = corner_env.step(0)
        assert reward == -10.0
        assert terminated is True
        assert info["game_state"] == "LOST"
        assert obs[0, 0] == 9

    def test_safe_reveal(self, corner_env: MinesweeperEnv) -> None:
        """A single safe cell scores +1."""
        obs, reward, terminated, _, _ = corner_env.step(4)
        assert reward == 1.0
        assert terminated is False
        assert obs[1, 1] == 1

    def test_repeated_reveal_is_penalised(self, corner_env: MinesweeperEnv) -> None:
        """Actions that change nothing cost a little."""
        corner_env.step(4)
        _, reward, _, _, _ = corner_env.step(4)
        assert reward == -0.1

    def test_flag_action(self, corner_env: MinesweeperEnv) -> None:
        """Flag actions toggle flags and block reveals."""
        obs, reward, _, _, _ = corner_env.step(9 + 4)
        assert reward == 0.0
        assert obs[1, 1] == -2

        obs, reward, _, _, _ = corner_env.step(4)
        assert reward == -0.1
        assert obs[1, 1] == -2


class TestActionMask:
    """Test the valid action mask."""

    def test_fresh_board_everything_valid(self, env: MinesweeperEnv) -> None:
        """Every cell can be revealed or flagged."""
        assert env.get_action_mask().all()

    def test_mask_tracks_flags_and_reveals(self, corner_env: MinesweeperEnv) -> None:
        """Flagged cells cannot be revealed, revealed cells cannot be flagged."""
        corner_env.step(9 + 0)
        corner_env.step(4)
        mask = corner_env.get_action_mask()
        assert not mask[0]
        assert mask[9 + 0]
        assert not mask[4]
        assert not mask[9 + 4]

    def test_mask_empty_after_game_over(self, corner_env: MinesweeperEnv) -> None:
        """No action is useful once the game ends."""
        corner_env.step(0)
        assert not corner_env.get_action_mask().any()


class TestRender:
    """Test rendering modes."""

    def test_ansi_render(self, corner_env: MinesweeperEnv) -> None:
        """ANSI mode returns the status line and grid."""
        text = corner_env.render()
        assert text.split("\n")[0].startswith("Minesweeper")
        assert ". . ." in text

    def test_human_render_prints(self, capsys) -> None:
        """Human mode prints the board."""
        environment = MinesweeperEnv(BoardConfig(2, 2, 1), render_mode="human")
        environment.reset(seed=0)
        assert environment.render() is None
        assert "Minesweeper" in capsys.readouterr().out
