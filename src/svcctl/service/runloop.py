"""Run loop bridging host start/stop callbacks to termination signals.

The loop runs once: start, block until a termination request, stop. It is
not a supervisor; restarting a crashed process is left to the init system.

Only interceptable signals are awaited (SIGINT, SIGTERM). SIGKILL cannot be
caught, so a forceful kill ends the process without running ``on_stop``.
"""

from __future__ import annotations

import asyncio
import logging
import signal as signal_module
import threading
from collections.abc import Callable, Sequence
from enum import Enum

from svcctl.service.errors import SignalWaitError, StartError, StopError

logger = logging.getLogger(__name__)

TERMINATION_SIGNALS: tuple[signal_module.Signals, ...] = (
    signal_module.SIGINT,
    signal_module.SIGTERM,
)

Callback = Callable[[], object]
Waiter = Callable[[Sequence[signal_module.Signals]], signal_module.Signals]


class RunState(Enum):
    """Run loop state."""

    STARTING = "starting"
    RUNNING = "running"
    STOPPED = "stopped"


def wait_for_signal(
    signals: Sequence[signal_module.Signals] = TERMINATION_SIGNALS,
) -> signal_module.Signals:
    """Block until one of ``signals`` is delivered to the process.

    Must be called from the main thread. Previously installed handlers are
    restored afterwards.

    Returns:
        The signal that was received.
    """
    previous = {sig: signal_module.getsignal(sig) for sig in signals}

    async def wait() -> signal_module.Signals:
        loop = asyncio.get_running_loop()
        received: asyncio.Future[signal_module.Signals] = loop.create_future()

        def handle_signal(sig: signal_module.Signals) -> None:
            if not received.done():
                received.set_result(sig)

        for sig in signals:
            loop.add_signal_handler(sig, handle_signal, sig)
        try:
            return await received
        finally:
            for sig in signals:
                loop.remove_signal_handler(sig)

    try:
        return asyncio.run(wait())
    finally:
        for sig, handler in previous.items():
            if handler is not None:
                signal_module.signal(sig, handler)


class RunLoop:
    """Single-shot start -> wait -> stop state machine."""

    def __init__(
        self,
        on_start: Callback,
        on_stop: Callback,
        *,
        waiter: Waiter = wait_for_signal,
        signals: Sequence[signal_module.Signals] = TERMINATION_SIGNALS,
    ):
        self._on_start = on_start
        self._on_stop = on_stop
        self._waiter = waiter
        self._signals = tuple(signals)
        self.state = RunState.STARTING
        self.received_signal: signal_module.Signals | None = None

    def run(self) -> None:
        """Start, wait for a termination request, then stop.

        Raises:
            SignalWaitError: If signals cannot be awaited from this thread
                (nothing is called), or if the waiter failed after a
                successful start (``on_stop`` is still called).
            StartError: If ``on_start`` raised. ``on_stop`` is not called.
            StopError: If ``on_stop`` raised.
        """
        if (
            self._waiter is wait_for_signal
            and threading.current_thread() is not threading.main_thread()
        ):
            raise SignalWaitError("Signal handlers can only be set in the main thread")

        self.state = RunState.STARTING
        try:
            self._on_start()
        except Exception as e:
            logger.debug("start_callback_failed: %s", e)
            raise StartError(f"Start callback failed: {e}") from e

        self.state = RunState.RUNNING
        logger.debug("waiting_for_termination")
        try:
            self.received_signal = self._waiter(self._signals)
        except Exception as e:
            logger.debug("signal_wait_failed: %s", e)
            self._stop()
            raise SignalWaitError(f"Waiting for termination failed: {e}") from e
        logger.info("termination_requested: %s", self.received_signal.name)

        self._stop()

    def _stop(self) -> None:
        self.state = RunState.STOPPED
        try:
            self._on_stop()
        except Exception as e:
            logger.debug("stop_callback_failed: %s", e)
            raise StopError(f"Stop callback failed: {e}") from e
