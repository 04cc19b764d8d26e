from backend.engine.gamegenerator.generator import GameGenerator, random_walk

__all__ = ["GameGenerator", "random_walk"]
