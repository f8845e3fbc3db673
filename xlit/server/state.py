from dataclasses import dataclass
from typing import Optional

from pynvim_pp.logging import log
from std2.cell import RefCell

from ..lang import msg
from ..shared.settings import DisplayOptions


@dataclass(frozen=True)
class State:
    enabled: bool


_CELL = RefCell(State(enabled=True))


def state(enabled: Optional[bool] = None) -> State:
    old_state = _CELL.val

    new_state = State(
        enabled=old_state.enabled if enabled is None else enabled,
    )
    _CELL.val = new_state

    return new_state


def toggle() -> State:
    new_state = state(enabled=not _CELL.val.enabled)
    log.info("%s", f"XLIT -- enabled :: {new_state.enabled}")
    return new_state


def indicator(display: DisplayOptions) -> str:
    if state().enabled:
        return msg("indicator_enabled") if display.enabled is None else display.enabled
    else:
        return (
            msg("indicator_disabled")
            if display.disabled is None
            else display.disabled
        )
