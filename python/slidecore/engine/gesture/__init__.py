from slidecore.engine.gesture.translator import GestureTranslator, Point, Rect

__all__ = ["GestureTranslator", "Point", "Rect"]
