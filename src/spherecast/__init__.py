"""Brute-force ray caster that renders one shaded sphere into an ASCII PPM file."""

__version__ = "0.1.0"
