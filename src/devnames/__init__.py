"""
devnames - human-friendly nicknames for Android device serials.

Keeps a registry of nickname -> device serial mappings in a JSON config file
so that other device commands can accept a short nickname in place of the
serial reported by `adb devices -l`.
"""

__version__ = "0.1.0"

__all__ = []
