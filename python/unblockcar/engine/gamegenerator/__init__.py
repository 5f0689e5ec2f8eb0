from unblockcar.engine.gamegenerator.generator import SAMPLES, GameGenerator

__all__ = ["SAMPLES", "GameGenerator"]
