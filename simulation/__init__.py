"""Simulation engine for dealing and ranking showdowns."""

from simulation.runner import Showdown, ShowdownRunner

__all__ = ["Showdown", "ShowdownRunner"]
