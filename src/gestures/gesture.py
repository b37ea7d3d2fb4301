"""
Hand Gesture Catalogue

This module defines the closed set of hand gestures a recording can be
labelled with, and how each one is shown to a user.

The gesture is metadata for the caller and the report layer: the
filtering pipeline never looks at it.
"""
import numbers
from enum import Enum
from typing import Dict, List

from ..signal_processing.validation import InvalidParameterError


class Gesture(Enum):
    """
    Enumeration of the supported hand gestures.

    Values are the menu numbers users pick them by (1-based).
    """
    FIST = 1
    OPEN = 2
    TWO_FINGER_PINCH = 3
    THREE_FINGER_PINCH = 4
    POINTING = 5
    HOOK = 6
    THUMBS_UP = 7
    RING_FINGER_GRASP = 8

    @classmethod
    def from_number(cls, number) -> 'Gesture':
        """
        Look up a gesture by its menu number.

        Args:
            number: Menu number (1-8), int or numeric string

        Returns:
            The matching Gesture

        Raises:
            InvalidParameterError: if the number is not on the menu
        """
        # bool is Integral, and floats would truncate onto a valid entry
        if isinstance(number, str):
            try:
                number = int(number.strip())
            except ValueError:
                raise InvalidParameterError(f"Invalid gesture number: {number!r}") from None
        elif isinstance(number, bool) or not isinstance(number, numbers.Integral):
            raise InvalidParameterError(f"Invalid gesture number: {number!r}")

        try:
            return cls(int(number))
        except ValueError:
            raise InvalidParameterError(f"Invalid gesture number: {number!r}") from None

    @classmethod
    def from_name(cls, name: str) -> 'Gesture':
        """Look up a gesture by enum name or display name (case-insensitive)."""
        key = str(name).strip().lower()
        for gesture in cls:
            if key in (gesture.name.lower(), gesture.display_name.lower()):
                return gesture
        raise InvalidParameterError(f"Unknown gesture: {name!r}")

    @property
    def display_name(self) -> str:
        return GESTURE_NAMES[self]


# Display names, owned by the report layer
GESTURE_NAMES: Dict[Gesture, str] = {
    Gesture.FIST: 'Fist',
    Gesture.OPEN: 'Open',
    Gesture.TWO_FINGER_PINCH: 'Two Finger Pinch',
    Gesture.THREE_FINGER_PINCH: 'Three Finger Pinch',
    Gesture.POINTING: 'Pointing',
    Gesture.HOOK: 'Hook',
    Gesture.THUMBS_UP: 'Thumbs Up',
    Gesture.RING_FINGER_GRASP: 'Ring Finger Grasp'
}


def gesture_menu() -> List[str]:
    """
    Get the menu lines listing every gesture.

    Returns:
        Lines like ['G1 = Fist', 'G2 = Open', ...]
    """
    return [f"G{gesture.value} = {gesture.display_name}" for gesture in Gesture]


def get_gesture_catalogue() -> List[Dict[str, object]]:
    """Get all gestures as JSON-friendly dictionaries."""
    return [
        {'number': gesture.value, 'name': gesture.name.lower(), 'display_name': gesture.display_name}
        for gesture in Gesture
    ]
