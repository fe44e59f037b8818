"""Rostrum: debate practice against an AI opponent."""

__version__ = "0.1.0"
