"""Registry operations over the loaded workspace list.

Managers raise domain exceptions from ``claudy.errors`` and never print or
exit -- turning an error into a fatal message or a warning is the caller's
responsibility.
"""
