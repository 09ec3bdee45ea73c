"""Keyboard and mouse state tracking driven by window messages."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum, IntEnum

KEY_COUNT = 256
KEY_DOWN_BIT = 0x8000


class MouseButton(IntEnum):
    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


class MouseMessage(Enum):
    """Mouse events a window can deliver."""

    MOVE = "move"
    LEFT_DOWN = "left_down"
    LEFT_UP = "left_up"
    RIGHT_DOWN = "right_down"
    RIGHT_UP = "right_up"
    MIDDLE_DOWN = "middle_down"
    MIDDLE_UP = "middle_up"
    WHEEL = "wheel"


_BUTTON_CHANGES: dict[MouseMessage, tuple[MouseButton, bool]] = {
    MouseMessage.LEFT_DOWN: (MouseButton.LEFT, True),
    MouseMessage.LEFT_UP: (MouseButton.LEFT, False),
    MouseMessage.RIGHT_DOWN: (MouseButton.RIGHT, True),
    MouseMessage.RIGHT_UP: (MouseButton.RIGHT, False),
    MouseMessage.MIDDLE_DOWN: (MouseButton.MIDDLE, True),
    MouseMessage.MIDDLE_UP: (MouseButton.MIDDLE, False),
}


def _check_key(key: int) -> int:
    if not 0 <= key < KEY_COUNT:
        raise IndexError(f"key code {key} is outside 0..{KEY_COUNT - 1}")
    return key


class KeyboardState:
    """Current and previous snapshot of the 256 virtual-key states.

    A key counts as held when bit 0x8000 of its state is set.
    """

    def __init__(self) -> None:
        self._prev: tuple[int, ...] = (0,) * KEY_COUNT
        self._curr: tuple[int, ...] = (0,) * KEY_COUNT

    def update(self, states: Sequence[int] | Mapping[int, int]) -> None:
        """Take a new snapshot; the old one becomes the previous state.

        ``states`` is either a sequence of all 256 key states or a mapping
        from key code to state, where missing keys are treated as up.
        """
        if isinstance(states, Mapping):
            for key in states:
                _check_key(key)
            snapshot = tuple(int(states.get(key, 0)) for key in range(KEY_COUNT))
        else:
            snapshot = tuple(int(s) for s in states)
            if len(snapshot) != KEY_COUNT:
                raise ValueError(f"expected {KEY_COUNT} key states, got {len(snapshot)}")
        self._prev = self._curr
        self._curr = snapshot

    def is_key_down(self, key: int) -> bool:
        return bool(self._curr[_check_key(key)] & KEY_DOWN_BIT)

    def is_key_pressed(self, key: int) -> bool:
        """True only on the snapshot in which the key went down."""
        key = _check_key(key)
        return not (self._prev[key] & KEY_DOWN_BIT) and bool(self._curr[key] & KEY_DOWN_BIT)

    def is_key_released(self, key: int) -> bool:
        """True only on the snapshot in which the key came up."""
        key = _check_key(key)
        return bool(self._prev[key] & KEY_DOWN_BIT) and not (self._curr[key] & KEY_DOWN_BIT)


class MouseState:
    """Mouse position, per-frame motion, wheel and button state."""

    def __init__(self) -> None:
        self.x = 0.0
        self.y = 0.0
        self.delta_x = 0.0
        self.delta_y = 0.0
        self.wheel_delta = 0
        self.left_button_down = False
        self.right_button_down = False
        self.middle_button_down = False
        self.is_tracking = False
        self.is_inside = False

    def process_message(
        self,
        message: MouseMessage,
        x: float = 0.0,
        y: float = 0.0,
        wheel_delta: int = 0,
    ) -> None:
        """Apply one mouse message to the state."""
        message = MouseMessage(message)
        if message is MouseMessage.MOVE:
            if not self.is_tracking:
                self.is_tracking = True
                self.is_inside = True
            self.delta_x = x - self.x
            self.delta_y = y - self.y
            self.x = float(x)
            self.y = float(y)
        elif message is MouseMessage.WHEEL:
            self.wheel_delta = int(wheel_delta)
        elif message in _BUTTON_CHANGES:
            button, down = _BUTTON_CHANGES[message]
            self._set_button(button, down)

    def is_down(self, button: MouseButton | int) -> bool:
        button = MouseButton(button)
        if button is MouseButton.LEFT:
            return self.left_button_down
        if button is MouseButton.RIGHT:
            return self.right_button_down
        return self.middle_button_down

    def reset_frame_state(self) -> None:
        """Clear motion and wheel values at the end of a frame."""
        self.delta_x = 0.0
        self.delta_y = 0.0
        self.wheel_delta = 0

    def reset_on_out_of_bounds(self) -> None:
        """Release every button and stop tracking once the mouse leaves."""
        self.left_button_down = False
        self.right_button_down = False
        self.middle_button_down = False
        self.is_tracking = False
        self.is_inside = False

    def _set_button(self, button: MouseButton, down: bool) -> None:
        if button is MouseButton.LEFT:
            self.left_button_down = down
        elif button is MouseButton.RIGHT:
            self.right_button_down = down
        else:
            self.middle_button_down = down