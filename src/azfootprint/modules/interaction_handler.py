"""User interaction abstraction for CLI and testing.

This module provides a protocol-based approach to user interaction, allowing
different implementations for CLI (using click) and testing (mock responses).

Menus are 0-indexed to match the numbers users type:

    Available Subscriptions:
    [0] Prod (sub-1)
    [1] Dev (sub-2)
    Select a subscription by number: 1

Example:
    >>> handler = CLIInteractionHandler()
    >>> idx = handler.prompt_choice(
    ...     "Select a VM by number", ["vm-a", "vm-b"], header="Available VMs:"
    ... )
    >>> handler.show_info(f"Selected VM: {['vm-a', 'vm-b'][idx]}")

    Testing example:
    >>> test_handler = MockInteractionHandler(choice_responses=[1])
    >>> test_handler.prompt_choice("Select:", ["a", "b"])
    1
"""

from typing import Protocol, runtime_checkable

import click


@runtime_checkable
class InteractionHandler(Protocol):
    """Protocol for user interaction."""

    def prompt_choice(
        self,
        message: str,
        choices: list[str],
        header: str | None = None,
    ) -> int:
        """Prompt user to select from a numbered menu.

        Args:
            message: Prompt message to display
            choices: Menu entry labels, in display order
            header: Optional line printed above the menu

        Returns:
            Zero-based index of selected choice

        Raises:
            ValueError: If choices is empty
            click.Abort: If user cancels (CLI implementation)
        """
        ...

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        ...


class CLIInteractionHandler:
    """Click-based CLI interaction handler.

    Invalid input never selects anything: non-numeric and out-of-range
    entries are reported and the prompt is repeated.
    """

    def prompt_choice(
        self,
        message: str,
        choices: list[str],
        header: str | None = None,
    ) -> int:
        """Prompt user to select from a 0-indexed numbered menu.

        Args:
            message: Prompt message to display
            choices: Menu entry labels, in display order
            header: Optional line printed above the menu

        Returns:
            Zero-based index of selected choice

        Raises:
            ValueError: If choices is empty
            click.Abort: If user cancels (Ctrl+C) or input ends
        """
        if not choices:
            raise ValueError("choices cannot be empty")

        if header:
            click.echo(header)

        for i, label in enumerate(choices):
            click.echo(f"[{click.style(str(i), fg='cyan')}] {label}")

        while True:
            try:
                choice_str = click.prompt(message, type=str, show_default=False)
                choice_num = int(choice_str.strip())

                if 0 <= choice_num < len(choices):
                    return choice_num
                click.secho(
                    f"Please enter a number between 0 and {len(choices) - 1}",
                    fg="red",
                )
            except ValueError:
                click.secho("Please enter a valid number", fg="red")
            except (KeyboardInterrupt, EOFError, click.Abort):
                click.echo()
                raise click.Abort() from None

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        click.echo(message)


class MockInteractionHandler:
    """Mock interaction handler for testing with pre-programmed responses.

    Tracks all interactions for verification in tests.

    Example:
        >>> handler = MockInteractionHandler(choice_responses=[0, 1])
        >>> handler.prompt_choice("Select:", ["a", "b"])
        0
        >>> len(handler.interactions)
        1
    """

    def __init__(self, choice_responses: list[int] | None = None):
        self.choice_responses = choice_responses or []
        self.interactions: list[dict] = []
        self._choice_index = 0

    def prompt_choice(
        self,
        message: str,
        choices: list[str],
        header: str | None = None,
    ) -> int:
        """Return next pre-programmed choice response.

        Raises:
            ValueError: If choices is empty or the response is out of range
            IndexError: If no more choice responses available
        """
        if not choices:
            raise ValueError("choices cannot be empty")

        if self._choice_index >= len(self.choice_responses):
            raise IndexError(
                f"No more choice responses available. "
                f"Provided {len(self.choice_responses)}, "
                f"needed {self._choice_index + 1}"
            )

        response = self.choice_responses[self._choice_index]
        self._choice_index += 1

        if not 0 <= response < len(choices):
            raise ValueError(
                f"Invalid pre-programmed response {response} "
                f"for {len(choices)} choices"
            )

        self.interactions.append(
            {
                "type": "choice",
                "message": message,
                "header": header,
                "choices": list(choices),
                "response": response,
            }
        )

        return response

    def show_info(self, message: str) -> None:
        """Record info message without displaying."""
        self.interactions.append({"type": "info", "message": message})

    def get_interactions_by_type(self, interaction_type: str) -> list[dict]:
        """Get all interactions of a specific type ("choice" or "info")."""
        return [
            interaction
            for interaction in self.interactions
            if interaction["type"] == interaction_type
        ]


# Type alias for convenience
Handler = InteractionHandler
