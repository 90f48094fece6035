"""States and the machine that switches between them."""

from __future__ import annotations

from typing import Optional


class StateNode:
    """Base state that tracks whether it is active and for how long.

    Subclasses override the hooks and call ``super()`` to keep the tracking.
    """

    def __init__(self) -> None:
        self.active = False
        self.elapsed = 0.0

    def on_enter(self) -> None:
        self.active = True
        self.elapsed = 0.0

    def on_update(self, delta_time: float) -> None:
        self.elapsed += delta_time

    def on_exit(self) -> None:
        self.active = False


class StateMachine:
    """Runs one registered state at a time, keyed by id."""

    def __init__(self) -> None:
        self._should_init = True
        self._current: Optional[StateNode] = None
        self._states: dict[str, StateNode] = {}

    @property
    def current_state(self) -> Optional[StateNode]:
        return self._current

    def on_update(self, delta_time: float) -> None:
        if self._current is None:
            return
        if self._should_init:
            self._current.on_enter()
            self._should_init = False
        self._current.on_update(delta_time)

    def set_entry(self, state_id: str) -> None:
        self._current = self._states.get(state_id)

    def switch_to(self, state_id: str) -> None:
        if self._current is not None:
            self._current.on_exit()
        self._current = self._states.get(state_id)
        if self._current is not None:
            self._current.on_enter()

    def register_state(self, state_id: str, state_node: StateNode) -> None:
        self._states[state_id] = state_node