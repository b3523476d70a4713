"""Immutable view state and the pure transitions the controller applies."""

from dataclasses import dataclass, replace

from weatherlog.models.reading import HistoryRecord, Reading


@dataclass(frozen=True)
class ViewState:
    reading: Reading | None = None
    history: tuple[HistoryRecord, ...] = ()
    show_history: bool = False


def with_reading(state: ViewState, reading: Reading) -> ViewState:
    return replace(state, reading=reading)


def without_reading(state: ViewState) -> ViewState:
    return replace(state, reading=None)


def with_history(state: ViewState, records: list[HistoryRecord]) -> ViewState:
    return replace(state, history=tuple(records))


def toggle_history(state: ViewState) -> ViewState:
    return replace(state, show_history=not state.show_history)
