from slidecore.engine.animation.controller import AnimationController, AnimationPhase

__all__ = ["AnimationController", "AnimationPhase"]
