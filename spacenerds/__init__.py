"""Vector and quaternion math, packet marshalling, stroke fonts, data files and widget logic for a starship bridge simulator."""

__version__ = "0.1.0"