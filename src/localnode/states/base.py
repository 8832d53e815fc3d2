"""Lifecycle state contract."""

import logging

from localnode.models import EventType, RunOptions


class State:
    """One phase of the local network lifecycle.

    ``start()`` runs the phase once and returns its terminal event. Subclasses
    report expected failures as ``EventType.UNRESOLVABLE_ERROR`` rather than
    raising.
    """

    def __init__(self, options: RunOptions, logger: logging.Logger, console):
        self.options = options
        self.name = type(self).__name__
        self.logger = logger.getChild(self.name)
        self.console = console
        self.logger.debug("%s initialized.", self.name)

    def start(self) -> EventType:
        raise NotImplementedError
