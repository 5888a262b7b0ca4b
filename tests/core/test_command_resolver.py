"""Tests for command resolution."""

from unittest.mock import patch

import click
import pytest

from container_selector.core.command_resolver import prompt_for_command, resolve_command
from container_selector.core.constants import COMMAND_PROMPT
from container_selector.models.config import SelectorConfig
from container_selector.services.exceptions import InputReadError


class TestResolveCommand:
    """Test cases for resolve_command."""

    @patch('container_selector.core.command_resolver.click.prompt')
    def test_explicit_command_wins(self, mock_prompt):
        """Test an explicit command is used verbatim."""
        config = SelectorConfig(command="  ls -la  ", no_prompt=True)

        assert resolve_command(config) == "  ls -la  "
        mock_prompt.assert_not_called()

    @patch('container_selector.core.command_resolver.click.prompt')
    def test_no_prompt_defaults_to_bash(self, mock_prompt):
        """Test --no-prompt uses the default shell."""
        config = SelectorConfig(no_prompt=True)

        assert resolve_command(config) == "bash"
        mock_prompt.assert_not_called()

    @patch('container_selector.core.command_resolver.click.prompt')
    def test_empty_explicit_command_falls_through(self, mock_prompt):
        """Test an empty --command behaves as if it were not given."""
        config = SelectorConfig(command="", no_prompt=True)

        assert resolve_command(config) == "bash"

    @patch('container_selector.core.command_resolver.click.prompt')
    def test_prompts_otherwise(self, mock_prompt):
        """Test the operator is prompted without flags."""
        mock_prompt.return_value = "python manage.py shell\n"

        assert resolve_command(SelectorConfig()) == "python manage.py shell"
        assert mock_prompt.call_args[0][0] == COMMAND_PROMPT


class TestPromptForCommand:
    """Test cases for prompt_for_command."""

    @pytest.mark.parametrize("answer", ["", "   ", "\t \t"])
    @patch('container_selector.core.command_resolver.click.prompt')
    def test_blank_answer_defaults_to_bash(self, mock_prompt, answer):
        """Test empty or whitespace-only answers become bash."""
        mock_prompt.return_value = answer

        assert prompt_for_command() == "bash"

    @patch('container_selector.core.command_resolver.click.prompt')
    def test_answer_is_trimmed(self, mock_prompt):
        """Test surrounding whitespace is removed."""
        mock_prompt.return_value = "  top  "

        assert prompt_for_command() == "top"

    @patch('container_selector.core.command_resolver.click.prompt')
    def test_eof_raises_input_read_error(self, mock_prompt):
        """Test end of input before any answer."""
        mock_prompt.side_effect = click.Abort()

        with pytest.raises(InputReadError, match="failed to read command: input aborted"):
            prompt_for_command()

    @patch('container_selector.core.command_resolver.click.prompt')
    def test_os_error_raises_input_read_error(self, mock_prompt):
        """Test read failures are wrapped."""
        mock_prompt.side_effect = OSError("Bad file descriptor")

        with pytest.raises(InputReadError, match="Bad file descriptor"):
            prompt_for_command()
