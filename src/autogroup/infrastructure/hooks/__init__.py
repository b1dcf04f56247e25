"""Infrastructure hooks module.

Contains built-in hooks that provide core system functionality.
"""

from autogroup.infrastructure.hooks.builtin_hooks import register_builtin_hooks

__all__ = ["register_builtin_hooks"]
