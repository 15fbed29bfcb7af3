"""
Точка входа для запуска модуля.

Позволяет запускать утилиту как:
    python -m ifname_sort [команда] [опции]

Примеры:
    python -m ifname_sort show
    python -m ifname_sort generate --dry-run
"""

from .cli import main

if __name__ == "__main__":
    main()
