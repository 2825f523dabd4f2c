"""Invitation lifecycle engine: invite links, acceptance and statistics."""

__version__ = "1.0.0"
