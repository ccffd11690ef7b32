"""Puzzle engine subsystems: play, generation, state, animation, input."""
