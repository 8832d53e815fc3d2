"""Sequences lifecycle states and stops on the first unrecoverable outcome."""

import logging
from typing import Sequence

from rich.console import Console

from .errors import LocalNodeError
from .models import EventType
from .states.base import State


class StateController:
    """Activates each state in order, one at a time.

    A state is started only after the previous one returned ``FINISH``. Any
    other event ends the run; states that already ran are not rolled back.
    """

    def __init__(self, states: Sequence[State], logger: logging.Logger, console: Console):
        self.states = list(states)
        self.logger = logger
        self.console = console

    def activate(self, state: State) -> EventType:
        self.logger.debug("Activating %s...", state.name)
        try:
            return state.start()
        except LocalNodeError as exc:
            self.logger.error(str(exc))
            return EventType.UNRESOLVABLE_ERROR
        except Exception:
            self.logger.exception("Unexpected error in %s", state.name)
            return EventType.UNKNOWN_ERROR

    def run(self) -> int:
        try:
            for state in self.states:
                event = self.activate(state)
                if event is not EventType.FINISH:
                    self.console.print(f"[bold red]Error:[/bold red] {state.name} failed ({event.value}).")
                    self.logger.error("Stopping after %s returned %s.", state.name, event.value)
                    return 1
                self.logger.debug("%s finished.", state.name)
        except KeyboardInterrupt:
            self.console.print("[bold red]Operation cancelled by user.[/bold red]")
            self.logger.info("Operation cancelled by user")
            return 1

        return 0
