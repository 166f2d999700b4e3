from backend.engine.tilespawner.spawner import TileSpawner

__all__ = ["TileSpawner"]
