"""
Gesture Package - Gesture catalogue and display names
"""
from .gesture import Gesture, GESTURE_NAMES, gesture_menu, get_gesture_catalogue

__all__ = ['Gesture', 'GESTURE_NAMES', 'gesture_menu', 'get_gesture_catalogue']
