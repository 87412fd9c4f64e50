from .loop import GameConfig, GameEngine

__all__ = ["GameConfig", "GameEngine"]
