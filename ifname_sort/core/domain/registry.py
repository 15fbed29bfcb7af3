"""
Domain logic для сборки реестра интерфейсов.

Два способа сборки:
- build_registry: позиционная склейка трёх списков (имена, MAC, PCI)
- registry_from_results: структурная сборка из результатов по адаптерам

Не зависит от ethtool/ifconfig, работает с уже собранными данными.
"""

from typing import List, Sequence

from ..constants import FAILURE_POLICY_ABORT, FAILURE_POLICY_SKIP, FAILURE_POLICIES
from ..exceptions import AssemblyError, ConfigError, PartialCollectionError
from ..logging import get_logger
from ..models import (
    InterfaceRecord,
    InterfaceRegistry,
    CollectionResult,
    CollectionFailure,
)

logger = get_logger(__name__)


def build_registry(
    names: Sequence[str],
    addresses: Sequence[str],
    locations: Sequence[str],
) -> InterfaceRegistry:
    """
    Склеивает три списка в реестр по индексу.

    Запись i = (names[i], addresses[i], locations[i]).
    Уникальность и формат значений не проверяются.

    Args:
        names: Имена интерфейсов в порядке перечисления
        addresses: MAC-адреса
        locations: PCI адреса

    Returns:
        InterfaceRegistry: Реестр в порядке перечисления

    Raises:
        AssemblyError: Если длины списков различаются
    """
    lengths = (len(names), len(addresses), len(locations))
    if len(set(lengths)) != 1:
        # Обрезать до кратчайшего нельзя: MAC съедет на чужой интерфейс
        raise AssemblyError(
            "Списки имён, MAC и PCI адресов разной длины",
            lengths=lengths,
        )

    registry = InterfaceRegistry()
    for name, mac, bus in zip(names, addresses, locations):
        registry.append(InterfaceRecord(name=name, mac=mac, bus=bus))

    logger.debug(f"Реестр собран: {len(registry)} интерфейсов")
    return registry


def split_results(results: Sequence[CollectionResult]):
    """
    Делит результаты сбора на успешные записи и ошибки.

    Returns:
        tuple: (List[InterfaceRecord], List[CollectionFailure])
    """
    records: List[InterfaceRecord] = []
    failures: List[CollectionFailure] = []
    for result in results:
        if result.ok:
            records.append(result.record)
        else:
            failures.append(result)
    return records, failures


def registry_from_results(
    results: Sequence[CollectionResult],
    policy: str = FAILURE_POLICY_ABORT,
) -> InterfaceRegistry:
    """
    Собирает реестр из результатов сбора по адаптерам.

    Политики:
        abort: любой несобранный адаптер прерывает запуск
        skip: несобранные адаптеры логируются и пропускаются

    Args:
        results: Collected | CollectionFailure в порядке перечисления
        policy: abort или skip

    Returns:
        InterfaceRegistry: Реестр из полностью собранных записей

    Raises:
        PartialCollectionError: policy=abort и есть ошибки
        ConfigError: Неизвестная политика
    """
    if policy not in FAILURE_POLICIES:
        raise ConfigError(
            f"Неизвестная политика обработки ошибок: {policy}",
            key="policy.on_failure",
        )

    records, failures = split_results(results)

    if failures:
        for failure in failures:
            logger.warning(
                f"Адаптер не собран: {failure.error}",
                interface=failure.name,
            )
        if policy == FAILURE_POLICY_ABORT:
            raise PartialCollectionError(
                f"Не собрано адаптеров: {len(failures)} из {len(results)}",
                failures=failures,
            )
        if policy == FAILURE_POLICY_SKIP:
            logger.warning(f"Пропущено адаптеров: {len(failures)}")

    registry = InterfaceRegistry()
    for record in records:
        registry.append(record)
    return registry
