"""Engine for a scripted gamebook adventure: story scripts, a player with items, and saves."""

__version__ = "0.1.0"