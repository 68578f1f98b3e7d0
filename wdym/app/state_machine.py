"""The interaction state machine.

Phases move START -> SEARCHING -> RESULT -> FINISHED. Messages emitted by
a transition are queued and drained before the next input event is read,
so a lookup runs to completion (or failure) without interleaving with
key presses.
"""

import logging
from collections import deque

from wdym.exceptions import InvalidPhaseError, InvalidTransitionError, ProviderLookupError
from wdym.interfaces import SearchProvider, TerminalBackend
from wdym.models import InputEvent, KeyEvent, LookupResult, Phase, SearchConfig
from wdym.rendering import TextBlock, render

from .messages import LookupFailed, Message, QueryReceived, Quit, ResultReceived, Searching

logger = logging.getLogger(__name__)

QUIT_KEY = "q"


class LookupApp:
    """Owns the current phase, the search config and the held result.

    The machine is seeded with a pending QueryReceived message, so the
    first lookup starts before any input is read.
    """

    def __init__(self, config: SearchConfig, provider: SearchProvider):
        """Initialize the machine in the START phase.

        Args:
            config: The search to run
            provider: Provider matching ``config.provider``
        """
        self.config = config
        self.provider = provider
        self.phase = Phase.START
        self.error: ProviderLookupError | None = None
        self._result: LookupResult | None = None
        self._pending: deque[Message] = deque([QueryReceived(config)])

    @property
    def result(self) -> LookupResult:
        """The held result. Only valid in the RESULT phase.

        Raises:
            InvalidPhaseError: If read in any other phase
        """
        if self.phase is not Phase.RESULT or self._result is None:
            raise InvalidPhaseError(f"no result is available in phase {self.phase.name}")
        return self._result

    @property
    def finished(self) -> bool:
        return self.phase is Phase.FINISHED

    @property
    def has_pending(self) -> bool:
        return bool(self._pending)

    def view(self) -> list[TextBlock]:
        """Render the current state."""
        result = self._result if self.phase is Phase.RESULT else None
        return render(self.phase, self.config, result)

    def send(self, message: Message) -> None:
        """Queue a message behind any already pending ones.

        Quit jumps the queue.
        """
        if isinstance(message, Quit):
            self._pending.appendleft(message)
        else:
            self._pending.append(message)

    def step(self) -> bool:
        """Process one pending message.

        Returns:
            True if a message was processed, False if the queue was empty
        """
        if not self._pending:
            return False
        message = self._pending.popleft()
        emitted = self.update(message)
        if emitted is not None:
            self._pending.append(emitted)
        return True

    def run_until_idle(self) -> Phase:
        """Drain pending messages without reading any input.

        Returns:
            The phase reached once nothing is pending
        """
        while self.step():
            pass
        return self.phase

    def update(self, message: Message) -> Message | None:
        """Apply one message to the current phase.

        Args:
            message: The message to apply

        Returns:
            The message emitted by the transition, if any

        Raises:
            InvalidTransitionError: If the message is not accepted in the
                current phase
        """
        logger.debug(f"{self.phase.name} <- {type(message).__name__}")

        if isinstance(message, Quit):
            self._pending.clear()
            self.phase = Phase.FINISHED
            return None

        if self.phase is Phase.START and isinstance(message, QueryReceived):
            self.phase = Phase.SEARCHING
            return Searching(message.config)

        if self.phase is Phase.SEARCHING and isinstance(message, Searching):
            return self._search(message.config)

        if self.phase is Phase.SEARCHING and isinstance(message, ResultReceived):
            self._result = message.result
            self.phase = Phase.RESULT
            return None

        if self.phase is Phase.SEARCHING and isinstance(message, LookupFailed):
            self.error = message.error
            self.phase = Phase.FINISHED
            return None

        raise InvalidTransitionError(
            f"{type(message).__name__} is not accepted in phase {self.phase.name}"
        )

    def _search(self, config: SearchConfig) -> Message:
        # Blocks the loop until the provider answers
        try:
            result = self.provider.lookup(config)
        except ProviderLookupError as e:
            logger.warning(f"Lookup failed for '{config.query}': {e}")
            return LookupFailed(e)
        logger.info(f"Lookup succeeded: {result}")
        return ResultReceived(result)

    def handle_event(self, event: InputEvent) -> Message | None:
        """Map an input event to a message; only the quit key produces one."""
        if isinstance(event, KeyEvent) and event.key == QUIT_KEY:
            return Quit()
        return None

    def run(self, terminal: TerminalBackend) -> None:
        """Draw, read, update until FINISHED.

        Input is read only when no message is pending.

        Args:
            terminal: Where to draw and read events from

        Raises:
            ProviderLookupError: If the lookup failed; raised after the
                machine reached FINISHED
        """
        while not self.finished:
            terminal.draw(self.view())

            if not self._pending:
                message = self.handle_event(terminal.read_event())
                if message is not None:
                    self.send(message)

            self.step()

        if self.error is not None:
            raise self.error
