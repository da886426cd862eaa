"""Simulator for rotor cipher machines of the Enigma family."""

__version__ = "0.1.0"
