"""Assembly of enum catalog rows into an enum catalog."""

from typing import Iterable

from pg_schema_types.models.table import EnumCatalog


def build_enum_catalog(rows: Iterable[tuple[str, str]]) -> EnumCatalog:
    """
    Fold (type name, label) rows into a mapping of type name to labels.

    Labels keep the order in which the rows arrive; the catalog query is
    expected to deliver them ordered by (type name, label).

    Args:
        rows: Iterable of (enum type name, label) pairs

    Returns:
        Mapping of enum type name to a tuple of labels
    """
    labels: dict[str, list[str]] = {}
    for name, label in rows:
        labels.setdefault(name, []).append(label)

    return {name: tuple(values) for name, values in labels.items()}
