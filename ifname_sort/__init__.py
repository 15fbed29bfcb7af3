"""
ifname_sort - детерминированные имена сетевых интерфейсов.

Интерфейсы сортируются по PCI адресу и переименовываются в eth0, eth1, ...
Результат закрепляется udev правилами (70-persistent-net.rules)
и файлами ifcfg-<name>.
"""

__version__ = "1.0.0"
