"""Unit tests for interaction_handler module.

Tests CLI and Mock handlers for user interaction abstraction.
"""

from unittest.mock import call, patch

import click
import pytest

from azfootprint.modules.interaction_handler import (
    CLIInteractionHandler,
    InteractionHandler,
    MockInteractionHandler,
)


class TestCLIInteractionHandler:
    """Test CLI interaction handler."""

    def test_satisfies_protocol(self):
        assert isinstance(CLIInteractionHandler(), InteractionHandler)

    @patch("azfootprint.modules.interaction_handler.click.prompt")
    @patch("azfootprint.modules.interaction_handler.click.echo")
    def test_prompt_choice_zero_indexed(self, mock_echo, mock_prompt):
        """Typed number is returned as-is; menu starts at 0."""
        mock_prompt.return_value = "1"

        handler = CLIInteractionHandler()
        result = handler.prompt_choice("Select a VM by number", ["vm-a", "vm-b"])

        assert result == 1
        mock_prompt.assert_called_once_with(
            "Select a VM by number", type=str, show_default=False
        )

    @patch("azfootprint.modules.interaction_handler.click.prompt")
    @patch("azfootprint.modules.interaction_handler.click.echo")
    def test_prompt_choice_renders_header_and_menu(self, mock_echo, mock_prompt):
        mock_prompt.return_value = "0"

        CLIInteractionHandler().prompt_choice(
            "Select a subscription by number",
            ["Prod (sub-1)", "Dev (sub-2)"],
            header="Available Subscriptions:",
        )

        lines = [click.unstyle(c.args[0]) for c in mock_echo.call_args_list]
        assert lines == ["Available Subscriptions:", "[0] Prod (sub-1)", "[1] Dev (sub-2)"]

    @patch("azfootprint.modules.interaction_handler.click.prompt")
    @patch("azfootprint.modules.interaction_handler.click.echo")
    @patch("azfootprint.modules.interaction_handler.click.secho")
    def test_prompt_choice_reprompts_on_invalid_input(self, mock_secho, mock_echo, mock_prompt):
        """Non-numeric, too-large and negative entries are all rejected."""
        mock_prompt.side_effect = ["abc", "3", "-1", " 2 "]

        result = CLIInteractionHandler().prompt_choice("Choose", ["a", "b", "c"])

        assert result == 2
        assert mock_prompt.call_count == 4
        assert mock_secho.call_args_list == [
            call("Please enter a valid number", fg="red"),
            call("Please enter a number between 0 and 2", fg="red"),
            call("Please enter a number between 0 and 2", fg="red"),
        ]

    @patch("azfootprint.modules.interaction_handler.click.prompt")
    @patch("azfootprint.modules.interaction_handler.click.echo")
    def test_prompt_choice_abort(self, mock_echo, mock_prompt):
        mock_prompt.side_effect = click.Abort()

        with pytest.raises(click.Abort):
            CLIInteractionHandler().prompt_choice("Choose", ["a"])

    @patch("azfootprint.modules.interaction_handler.click.prompt")
    @patch("azfootprint.modules.interaction_handler.click.echo")
    def test_prompt_choice_keyboard_interrupt(self, mock_echo, mock_prompt):
        mock_prompt.side_effect = KeyboardInterrupt()

        with pytest.raises(click.Abort):
            CLIInteractionHandler().prompt_choice("Choose", ["a"])

    def test_prompt_choice_empty_choices_raises_error(self):
        with pytest.raises(ValueError, match="choices cannot be empty"):
            CLIInteractionHandler().prompt_choice("Choose", [])

    @patch("azfootprint.modules.interaction_handler.click.echo")
    def test_show_info(self, mock_echo):
        CLIInteractionHandler().show_info("Selected VM: vm-x")
        mock_echo.assert_called_once_with("Selected VM: vm-x")


class TestMockInteractionHandler:
    """Test mock interaction handler."""

    def test_returns_responses_in_sequence(self):
        handler = MockInteractionHandler(choice_responses=[1, 0])

        assert handler.prompt_choice("Q1", ["a", "b"]) == 1
        assert handler.prompt_choice("Q2", ["c"]) == 0

    def test_exhausted_responses_raise_index_error(self):
        handler = MockInteractionHandler(choice_responses=[0])
        handler.prompt_choice("Q1", ["a"])

        with pytest.raises(IndexError, match="No more choice responses"):
            handler.prompt_choice("Q2", ["b"])

    def test_out_of_range_response_raises(self):
        handler = MockInteractionHandler(choice_responses=[2])

        with pytest.raises(ValueError, match="Invalid pre-programmed response 2"):
            handler.prompt_choice("Q", ["a", "b"])

    def test_empty_choices_raise(self):
        with pytest.raises(ValueError, match="choices cannot be empty"):
            MockInteractionHandler(choice_responses=[0]).prompt_choice("Q", [])

    def test_records_interactions(self):
        handler = MockInteractionHandler(choice_responses=[0])
        handler.prompt_choice("Q", ["a"], header="H")
        handler.show_info("done")

        assert handler.interactions == [
            {"type": "choice", "message": "Q", "header": "H", "choices": ["a"], "response": 0},
            {"type": "info", "message": "done"},
        ]
        assert len(handler.get_interactions_by_type("info")) == 1
