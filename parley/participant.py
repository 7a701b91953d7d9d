"""Objects that take part in a dialogue and are told what happens in it."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping, Sequence

from .value import Value


class Participant:
    """A dialogue participant that passes each notification to a handler.

    Handlers are given by hook name (for example ``"on_event"``); hooks with
    no handler are ignored. Subclasses may override the hooks instead.
    Participants are notified in ascending priority order, so those with a
    higher priority are called last and get the final say, for example when
    setting variables in response to a request.
    """

    def __init__(
        self,
        priority: int = 0,
        handlers: Mapping[str, Callable[..., Any]] | None = None,
    ) -> None:
        self._priority = priority
        self._handlers = dict(handlers or {})

    def _dispatch(self, hook: str, *args: Any) -> None:
        handler = self._handlers.get(hook)
        if handler is not None:
            handler(*args)

    def priority(self) -> int:
        """Ordering priority; higher values are notified later."""
        return self._priority

    def on_starting(self, dialogue: Any, label: str | None) -> None:
        """Called when the dialogue starts or restarts from a label."""
        self._dispatch("on_starting", dialogue, label)

    def on_finished(self, dialogue: Any) -> None:
        """Called when the dialogue reaches its end."""
        self._dispatch("on_finished", dialogue)

    def on_speaker_line(self, dialogue: Any) -> None:
        """Called when a new speaker line becomes current."""
        self._dispatch("on_speaker_line", dialogue)

    def on_choice_made(self, dialogue: Any, index: int) -> None:
        """Called when a choice is picked."""
        self._dispatch("on_choice_made", dialogue, index)

    def on_proceeding(self, dialogue: Any) -> None:
        """Called just before the dialogue moves on from the current line."""
        self._dispatch("on_proceeding", dialogue)

    def on_event(self, dialogue: Any, event_name: str, args: Sequence[Value]) -> None:
        """Called when the script raises an event."""
        self._dispatch("on_event", dialogue, event_name, args)

    def on_variable_changed(self, dialogue: Any, name: str, value: Value, from_script: bool) -> None:
        """Called when a dialogue variable is set."""
        self._dispatch("on_variable_changed", dialogue, name, value, from_script)

    def on_variable_requested(self, dialogue: Any, name: str) -> None:
        """Called just before a variable is read, so it can be supplied."""
        self._dispatch("on_variable_requested", dialogue, name)


def _priority_of(participant: object) -> int:
    if isinstance(participant, Participant):
        return participant.priority()
    return 0


def sort_participants(participants: Iterable[object]) -> list[object]:
    """Participants in ascending priority order, keeping the given order for ties."""
    return sorted(participants, key=_priority_of)