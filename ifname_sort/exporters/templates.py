"""
Jinja2 шаблоны генерируемых файлов.

Шаблоны хранятся строками и грузятся через DictLoader,
чтобы не зависеть от установки package data.
"""

from jinja2 import DictLoader, Environment, StrictUndefined

# Каждое правило: пустая строка, правило, перевод строки.
# Итог для двух интерфейсов: "\nRULE0\n\nRULE1\n"
PERSISTENT_NET_RULES_TEMPLATE = (
    "{% for iface in interfaces %}\n"
    'SUBSYSTEM=="net", ACTION=="add", DRIVERS=="?*", '
    'ATTR{address}=="{{ iface.mac }}", ATTR{type}=="1", '
    'KERNEL=="eth*", NAME="{{ iface.name }}"\n'
    "{% endfor %}"
)

IFCFG_TEMPLATE = (
    "DEVICE={{ iface.name }}\n"
    "HWADDR={{ iface.mac }}\n"
    "TYPE=Ethernet\n"
    "ONBOOT=yes\n"
    "BOOTPROTO=none\n"
)

TEMPLATES = {
    "70-persistent-net.rules.j2": PERSISTENT_NET_RULES_TEMPLATE,
    "ifcfg.j2": IFCFG_TEMPLATE,
}


def get_environment() -> Environment:
    """
    Окружение Jinja2 для генерации конфигов.

    StrictUndefined: опечатка в имени поля даёт ошибку, а не пустая строка.
    """
    return Environment(
        loader=DictLoader(TEMPLATES),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
        autoescape=False,
    )
