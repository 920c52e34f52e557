"""Janken (rock-paper-scissors) served as a single web page."""

__version__ = "0.1.0"
