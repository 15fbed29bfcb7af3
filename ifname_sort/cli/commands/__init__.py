"""
CLI команды.

- show.py: show (сбор и порядок, без записи)
- generate.py: generate (полный pipeline)
"""

from .show import cmd_show
from .generate import cmd_generate

__all__ = [
    "cmd_show",
    "cmd_generate",
]
