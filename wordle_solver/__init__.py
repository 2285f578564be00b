"""Suggest Wordle guesses by how far each one narrows the remaining solutions."""

from .engine import *  # noqa: F401,F403

__version__ = "0.1.0"
