"""
mood_detective
==============

Does: Root package initializer for the sentiment lesson's judging engine.
Returns: Exposes internal subpackages (`engine`, `demo`) through a stable namespace.
Used by: All higher-level imports starting from `mood_detective.*`.
"""

__all__: list[str] = []
__docformat__ = "google"
