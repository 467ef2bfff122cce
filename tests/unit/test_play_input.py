"""Tests for human input handling."""

from unittest.mock import patch
from hitblow.game.schema import GuessError
from hitblow.play.input import HumanPlayer


class TestGetGuess:
    """Tests for HumanPlayer.get_guess."""

    def test_valid_guess(self):
        """Parses a valid guess, trimming whitespace."""
        with patch("builtins.input", return_value="  1234 \n"):
            result = HumanPlayer().get_guess()

        assert result.guess == (1, 2, 3, 4)
        assert result.quit is False
        assert result.error is None

    def test_invalid_guess(self):
        """Invalid text yields an error, not a guess."""
        with patch("builtins.input", return_value="1231"):
            result = HumanPlayer().get_guess()

        assert result.guess is None
        assert result.error.reason == GuessError.DUPLICATE_DIGIT

    def test_quit_words(self):
        """q, quit and exit all quit."""
        for word in ("q", "QUIT", "exit"):
            with patch("builtins.input", return_value=word):
                assert HumanPlayer().get_guess().quit is True

    def test_eof_quits(self):
        """EOF is treated as quit."""
        with patch("builtins.input", side_effect=EOFError):
            assert HumanPlayer().get_guess().quit is True

    def test_interrupt_quits(self):
        """Ctrl-C is treated as quit."""
        with patch("builtins.input", side_effect=KeyboardInterrupt):
            assert HumanPlayer().get_guess().quit is True


class TestAskPlayAgain:
    """Tests for HumanPlayer.ask_play_again."""

    def test_yes(self):
        with patch("builtins.input", return_value="Y"):
            assert HumanPlayer().ask_play_again() is True

    def test_no(self):
        with patch("builtins.input", return_value="no"):
            assert HumanPlayer().ask_play_again() is False

    def test_reprompts_on_invalid(self):
        """Keeps asking until y or n."""
        output: list[str] = []
        with patch("builtins.input", side_effect=["maybe", "", "n"]) as mock_input:
            answer = HumanPlayer().ask_play_again(output_fn=output.append)

        assert answer is False
        assert mock_input.call_count == 3
        assert len(output) == 2

    def test_eof_means_no(self):
        with patch("builtins.input", side_effect=EOFError):
            assert HumanPlayer().ask_play_again() is False
