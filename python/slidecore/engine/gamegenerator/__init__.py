from slidecore.engine.gamegenerator.generator import RandomSource, Scrambler

__all__ = ["RandomSource", "Scrambler"]
