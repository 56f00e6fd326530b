"""
DeviOS Scripted Sequencer

Timed multi-step output for animated command flows:
- Chains of delayed steps fired strictly in order
- Each step armed only when the previous one has fired
- Background thread or manual driving with an injectable clock
- Step output appended through a per-chain sink

Author: Deviser
Version: 1.0.0
"""

import heapq
import threading
import time
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, List

from devios.exceptions import SequencerError
from devios.logger import get_logger


Producer = Callable[[], Optional[List[Any]]]
Sink = Callable[[List[Any]], None]


@dataclass
class ChainStep:
    """A producer waiting ``delay_ms`` after the previous step."""
    delay_ms: float
    producer: Producer


@dataclass(order=True)
class ArmedStep:
    """
    The next step of a chain, placed on the timer queue.

    Sorted by fire time, then by arming order so steps due at the same
    instant fire first-come first-served.
    """
    fire_at: float
    sequence: int
    chain: 'Chain' = field(compare=False)


class Chain:
    """
    An ordered list of delayed steps.

    Steps are added with :meth:`then` and the chain is handed to the
    sequencer with :meth:`start`. A step's delay counts from the moment
    the previous step fired, so a late step can never overtake an
    earlier one.

    Example:
        >>> chain = sequencer.chain('boot', history.extend_last)
        >>> chain.then(600, lambda: [record]).then(800, clear_screen).start()
    """

    def __init__(self, sequencer: 'Sequencer', name: str, sink: Sink):
        self.name = name
        self._sequencer = sequencer
        self._sink = sink
        self._steps: deque[ChainStep] = deque()
        self._started = False
        self._fired = 0

    def then(self, after_ms: float, producer: Producer) -> 'Chain':
        """
        Append a step.

        Args:
            after_ms: Delay after the previous step, in milliseconds
            producer: Returns records for the sink, or None after doing
                its own mutation

        Returns:
            The chain, for fluent construction
        """
        if self._started:
            raise SequencerError("Cannot extend a chain that has started", chain=self.name)
        if after_ms < 0:
            raise ValueError(f"Step delay must not be negative: {after_ms}")

        self._steps.append(ChainStep(after_ms, producer))
        return self

    def start(self) -> 'Chain':
        """Arm the first step."""
        if self._started:
            raise SequencerError("Chain already started", chain=self.name)

        self._started = True
        self._sequencer._arm_next(self)
        return self

    @property
    def started(self) -> bool:
        return self._started

    @property
    def remaining(self) -> int:
        """Steps not fired yet."""
        return len(self._steps)

    @property
    def fired(self) -> int:
        return self._fired

    @property
    def done(self) -> bool:
        return self._started and not self._steps

    def _peek_delay(self) -> Optional[float]:
        return self._steps[0].delay_ms if self._steps else None

    def _fire(self) -> None:
        step = self._steps.popleft()
        self._fired += 1
        records = step.producer()
        if records:
            self._sink(records)

    def _abandon(self) -> None:
        self._steps.clear()

    def __repr__(self) -> str:
        return f"Chain(name={self.name!r}, fired={self._fired}, remaining={len(self._steps)})"


class Sequencer:
    """
    Timer queue for chained output steps.

    Armed steps are held in a heap ordered by fire time. The queue is
    drained either by a background thread (:meth:`start`) or manually
    (:meth:`run_pending`, :meth:`advance`, :meth:`run_until_idle`).
    Manual driving adds a virtual offset to the clock, so tests can use a
    frozen clock and never sleep.

    Every firing happens under one lock, so at most one step runs at a
    time regardless of which thread drains the queue.

    Example:
        >>> sequencer = Sequencer(clock=lambda: 0.0)
        >>> sequencer.chain('demo', sink).then(500, producer).start()
        >>> sequencer.advance(500)
        1
    """

    def __init__(
        self,
        time_scale: float = 1.0,
        clock: Optional[Callable[[], float]] = None,
        tick_interval: float = 0.01
    ):
        if time_scale < 0:
            raise ValueError(f"time_scale must not be negative: {time_scale}")

        self._logger = get_logger('sequencer')
        self._time_scale = time_scale
        self._clock = clock or time.monotonic
        self._tick_interval = tick_interval

        self._queue: List[ArmedStep] = []  # heapq
        self._lock = threading.RLock()
        self._counter = 0
        self._offset_ms = 0.0

        self._running = False
        self._thread: Optional[threading.Thread] = None
        self._shutdown_event = threading.Event()

        # Statistics
        self._steps_fired = 0
        self._steps_failed = 0

    @property
    def time_scale(self) -> float:
        return self._time_scale

    def now(self) -> float:
        """Current time in milliseconds, including any manual offset."""
        return self._clock() * 1000.0 + self._offset_ms

    def chain(self, name: str, sink: Sink) -> Chain:
        """
        Create an empty chain whose records go to ``sink``.

        Args:
            name: Label used in logs
            sink: Receives each non-empty batch of produced records
        """
        return Chain(self, name, sink)

    def _arm_next(self, chain: Chain) -> None:
        delay = chain._peek_delay()
        if delay is None:
            self._logger.debug("Chain finished", context={'chain': chain.name, 'fired': chain.fired})
            return

        with self._lock:
            self._counter += 1
            armed = ArmedStep(
                fire_at=self.now() + delay * self._time_scale,
                sequence=self._counter,
                chain=chain
            )
            heapq.heappush(self._queue, armed)

    def _pop_due(self, now: float) -> Optional[ArmedStep]:
        if self._queue and self._queue[0].fire_at <= now:
            return heapq.heappop(self._queue)
        return None

    def _fire(self, armed: ArmedStep) -> None:
        chain = armed.chain
        try:
            chain._fire()
            self._steps_fired += 1
        except Exception as e:
            self._steps_failed += 1
            self._logger.exception(
                "Sequencer step failed, abandoning chain",
                exc=e,
                context={'chain': chain.name, 'step': chain.fired}
            )
            chain._abandon()
            return

        self._arm_next(chain)

    def run_pending(self) -> int:
        """
        Fire every step that is due now.

        Steps armed by a firing with zero delay are fired in the same call.

        Returns:
            Number of steps fired
        """
        fired = 0
        with self._lock:
            while True:
                armed = self._pop_due(self.now())
                if armed is None:
                    break
                self._fire(armed)
                fired += 1
        return fired

    def advance(self, ms: float) -> int:
        """
        Move virtual time forward by ``ms`` milliseconds, firing steps in order.

        Time is moved step by step so each step is armed relative to the
        instant its predecessor fired.

        Returns:
            Number of steps fired
        """
        if ms < 0:
            raise ValueError(f"Cannot advance by a negative amount: {ms}")

        fired = 0
        with self._lock:
            target = self.now() + ms
            while self._queue and self._queue[0].fire_at <= target:
                armed = heapq.heappop(self._queue)
                if armed.fire_at > self.now():
                    self._offset_ms += armed.fire_at - self.now()
                self._fire(armed)
                fired += 1
            if target > self.now():
                self._offset_ms += target - self.now()
        return fired

    def run_until_idle(self, max_steps: int = 10000) -> int:
        """
        Fire every remaining step, jumping virtual time as needed.

        Args:
            max_steps: Upper bound on firings

        Returns:
            Number of steps fired
        """
        fired = 0
        with self._lock:
            while self._queue and fired < max_steps:
                armed = heapq.heappop(self._queue)
                if armed.fire_at > self.now():
                    self._offset_ms += armed.fire_at - self.now()
                self._fire(armed)
                fired += 1

        if self._queue:
            raise SequencerError(f"Sequencer still busy after {max_steps} steps")
        return fired

    @property
    def pending(self) -> int:
        """Number of chains with an armed step."""
        with self._lock:
            return len(self._queue)

    @property
    def idle(self) -> bool:
        return self.pending == 0

    def next_fire_in(self) -> Optional[float]:
        """Milliseconds until the next armed step, or None when idle."""
        with self._lock:
            if not self._queue:
                return None
            return max(0.0, self._queue[0].fire_at - self.now())

    def start(self) -> None:
        """Start draining the queue on a background thread."""
        if self._running:
            return

        self._running = True
        self._shutdown_event.clear()
        self._thread = threading.Thread(target=self._run_loop, name='devios-sequencer', daemon=True)
        self._thread.start()
        self._logger.info("Sequencer started")

    def stop(self) -> None:
        """Stop the background thread. Armed steps stay queued."""
        if not self._running:
            return

        self._running = False
        self._shutdown_event.set()

        if self._thread and self._thread.is_alive():
            self._thread.join(timeout=2.0)

        self._logger.info(
            "Sequencer stopped",
            context={
                'steps_fired': self._steps_fired,
                'steps_failed': self._steps_failed
            }
        )

    @property
    def running(self) -> bool:
        return self._running

    def _run_loop(self) -> None:
        self._logger.debug("Sequencer thread started")

        while self._running:
            self.run_pending()
            self._shutdown_event.wait(self._tick_interval)

        self._logger.debug("Sequencer thread exiting")

    def get_stats(self) -> dict[str, Any]:
        """Get sequencer statistics."""
        return {
            'running': self._running,
            'pending': self.pending,
            'steps_fired': self._steps_fired,
            'steps_failed': self._steps_failed,
            'time_scale': self._time_scale,
        }
