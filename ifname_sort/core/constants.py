"""
Константы ifname_sort.

Regex паттерны для разбора вывода ifconfig/ethtool,
имена генерируемых файлов и значения по умолчанию.
"""

import re

# Префикс новых имён интерфейсов: eth0, eth1, ...
DEFAULT_NAME_PREFIX = "eth"

# Какие имена из вывода ifconfig -a считаются кандидатами
DEFAULT_NAME_PATTERN = r"eth[0-9]+"

# MAC-адрес: ровно 6 пар hex цифр через двоеточие (cc:46:d6:4e:d6:68)
MAC_ADDRESS_PATTERN = re.compile(
    r"[0-9A-Fa-f]{2}:[0-9A-Fa-f]{2}:[0-9A-Fa-f]{2}:"
    r"[0-9A-Fa-f]{2}:[0-9A-Fa-f]{2}:[0-9A-Fa-f]{2}"
)

# PCI адрес из ethtool -i: строка "bus-info: 0000:04:00.0".
# Берётся всё от домена 0000: до конца строки.
BUS_LOCATION_PATTERN = re.compile(r"0000:.*")

# Структурный разбор PCI адреса для numeric сортировки:
# domain:bus:device.function, все поля hex
PCI_ADDRESS_PATTERN = re.compile(
    r"^(?P<domain>[0-9A-Fa-f]+):(?P<bus>[0-9A-Fa-f]+):"
    r"(?P<device>[0-9A-Fa-f]+)\.(?P<function>[0-7])$"
)

# Внешние утилиты
DEFAULT_LISTER_COMMAND = ["ifconfig", "-a"]
DEFAULT_INTROSPECT_COMMAND = "ethtool"
ADDRESS_MODE = "address"
DRIVER_MODE = "driver"
DEFAULT_INTROSPECT_FLAGS = {
    ADDRESS_MODE: "-P",   # ethtool -P eth0 -> Permanent address: ...
    DRIVER_MODE: "-i",    # ethtool -i eth0 -> bus-info: 0000:04:00.0
}

# Генерируемые файлы
PERSISTENT_NET_RULES_FILENAME = "70-persistent-net.rules"
IFCFG_FILENAME_PREFIX = "ifcfg-"
DEFAULT_RULES_DIR = "/etc/udev/rules.d"
DEFAULT_IFCFG_DIR = "/etc/sysconfig/network-scripts"

# Политика при ошибке сбора отдельного адаптера
FAILURE_POLICY_ABORT = "abort"
FAILURE_POLICY_SKIP = "skip"
FAILURE_POLICIES = (FAILURE_POLICY_ABORT, FAILURE_POLICY_SKIP)

# Стратегии сравнения PCI адресов
COMPARATOR_LEXICAL = "lexical"
COMPARATOR_NUMERIC = "numeric"
