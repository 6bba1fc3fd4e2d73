"""Argument conversion, line editing, key decoding, task scheduling, history storage and telnet negotiation for command line interfaces."""

__version__ = "0.1.0"