"""Alacritty setup (install + revert).

Core design goals:
- Explicit configuration, no ambient globals
- Fail-fast steps
- Backup before overwrite
- Centralized logging
"""

__all__ = []
