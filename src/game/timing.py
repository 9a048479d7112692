"""DAS/ARR auto-repeat for horizontal movement."""

from __future__ import annotations

LEFT = -1
RIGHT = 1


class ShiftRepeat:
    """Tracks held direction keys and turns hold time into repeat steps.

    A press moves the piece once right away (the caller does that). After
    the key has been held for `das_ms`, one step fires, then one more every
    `arr_ms`. Steps are counted from total hold time, so a long frame
    yields several steps rather than dropping them. With `arr_ms == 0` the
    piece slides as far as it can in a single frame.

    Attributes:
        direction: -1 left, +1 right, 0 none.
        held_ms: How long the current direction has been held.
    """

    def __init__(self) -> None:
        self.direction = 0
        self.held_ms = 0.0
        self._repeats = 0
        self._held = {LEFT: False, RIGHT: False}

    def press(self, direction: int) -> None:
        """Start charging a new direction; the most recent press wins."""
        self._held[direction] = True
        self._start(direction)

    def release(self, direction: int) -> None:
        """Stop a direction, falling back to the other key if still held."""
        self._held[direction] = False
        if direction != self.direction:
            return
        other = -direction
        self._start(other if self._held[other] else 0)

    def update(self, dt_ms: float, das_ms: float, arr_ms: float, max_steps: int) -> int:
        """Advance the hold timer and return the signed number of steps due.

        Args:
            dt_ms: Time elapsed since the last update.
            das_ms: Delay before auto-repeat starts.
            arr_ms: Interval between repeats (0 = instant).
            max_steps: Steps to report for an instant slide.

        Returns:
            Steps to apply this frame, negative for left.
        """
        if self.direction == 0:
            return 0
        self.held_ms += dt_ms
        if self.held_ms < das_ms:
            return 0
        if arr_ms <= 0:
            return self.direction * max_steps
        due = int((self.held_ms - das_ms) // arr_ms) + 1
        steps = max(0, due - self._repeats)
        self._repeats = max(self._repeats, due)
        return self.direction * steps

    def clear(self) -> None:
        self._held = {LEFT: False, RIGHT: False}
        self._start(0)

    def _start(self, direction: int) -> None:
        self.direction = direction
        self.held_ms = 0.0
        self._repeats = 0
