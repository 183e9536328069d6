from typing import List, Optional
from ..models import KeypadButton

KEYPAD_ROWS: List[List[KeypadButton]] = [
    [KeypadButton.number("1"), KeypadButton.number("2"), KeypadButton.number("3")],
    [KeypadButton.number("4"), KeypadButton.number("5"), KeypadButton.number("6")],
    [KeypadButton.number("7"), KeypadButton.number("8"), KeypadButton.number("9")],
    [KeypadButton.from_label("delete"), KeypadButton.number("0"), KeypadButton.from_label("enter")],
]

def keypad_labels() -> List[List[str]]:
    return [[button.label for button in row] for row in KEYPAD_ROWS]

def is_digit(value: str) -> bool:
    return isinstance(value, str) and len(value) == 1 and value in "0123456789"

def parse_answer(buffer: str) -> Optional[int]:
    """Parse the typed answer as a base-10 non-negative integer, None if it is not one."""
    if not buffer or not all(is_digit(ch) for ch in buffer):
        return None
    return int(buffer, 10)
