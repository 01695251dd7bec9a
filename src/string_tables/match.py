from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidInputError
from .log import logger
from .table import FlatTable


@dataclass(frozen=True)
class StateTable:
    """
    Transition function of a string-matching automaton for `pattern`.

    Rows are states 0..m, columns are the distinct characters of the text in
    order of first appearance. State m means the pattern has just matched.
    """

    pattern: str
    char_index: dict[str, int]
    next_state: FlatTable

    @property
    def pattern_length(self) -> int:
        return len(self.pattern)

    @property
    def alphabet(self) -> list[str]:
        return list(self.char_index)

    def get_next_state(self, state: int, ch: str) -> int:
        col = self.char_index.get(ch)
        if col is None:
            raise InvalidInputError(f"character {ch!r} is not in the automaton alphabet")
        return self.next_state.get(state, col)


def _longest_prefix_suffix(pattern: str, state: int, ch: str) -> int:
    pka = pattern[:state] + ch
    i = min(len(pka), len(pattern))
    while i > 0 and not pka.endswith(pattern[:i]):
        i -= 1
    return i


def build_state_table(text: str, pattern: str) -> StateTable:
    if len(pattern) > len(text):
        raise InvalidInputError(
            f"pattern length {len(pattern)} exceeds text length {len(text)}"
        )

    char_index: dict[str, int] = {}
    for ch in text:
        if ch not in char_index:
            char_index[ch] = len(char_index)

    next_state = FlatTable(len(pattern) + 1, len(char_index))
    for state in range(next_state.height):
        for ch, col in char_index.items():
            next_state.set(state, col, _longest_prefix_suffix(pattern, state, ch))

    logger.debug(
        "built state table: %d states x %d characters", next_state.height, next_state.width
    )
    return StateTable(pattern=pattern, char_index=char_index, next_state=next_state)


def fa_string_matcher(text: str, t: StateTable) -> list[int]:
    """
    Scan `text` once and return the shift of every occurrence of the pattern.
    """
    m = t.pattern_length
    # The empty pattern is accepted before any character is read.
    shifts: list[int] = [0] if m == 0 else []
    state = 0
    for i, ch in enumerate(text):
        state = t.get_next_state(state, ch)
        if state == m:
            shifts.append(i + 1 - m)
    return shifts


def exact_match(text: str, pattern: str) -> tuple[StateTable, list[int]]:
    t = build_state_table(text, pattern)
    shifts = fa_string_matcher(text, t)
    logger.debug("pattern %r occurs %d time(s)", pattern, len(shifts))
    return t, shifts
