"""Match history service: recent League of Legends matches for a summoner."""

__version__ = "0.1.0"
