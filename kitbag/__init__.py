"""Small tools and helper classes: containers, PCF fonts, file, zlib, network and puzzle utilities."""

__version__ = "0.1.0"