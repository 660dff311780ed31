"""Console maze game: manual play, randomized paths and BFS shortest path."""

__version__ = "1.0.0"
