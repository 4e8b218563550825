"""
Edgy - missing edge case detector for design flows.

Scans exported design screens for UI patterns (forms, lists, search,
destructive actions, navigation) and flags the edge case states they lack.
"""

__version__ = "0.1.0"
