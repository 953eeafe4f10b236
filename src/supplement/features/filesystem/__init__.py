"""Summary: Directory deletion helpers (nuke, prune empty ancestors).
Why: Keep destructive filesystem operations behind one small import surface.
"""

from .pruner import is_stop_marker, nuke, prune_empty_ancestors

__all__ = ["is_stop_marker", "nuke", "prune_empty_ancestors"]
