"""
Compare two schema models type by type.
"""

from dataclasses import dataclass

from xsdiff.analyze.schema import SchemaModel

ENTIRE_TYPE_MARKER = "ENTIRE TYPE: "


@dataclass(frozen=True)
class ComparisonRecord:
    """Members of one complex type found on only one side of a comparison."""

    type_name: str
    only_in_first: str = ""
    only_in_second: str = ""

    @property
    def has_differences(self) -> bool:
        return bool(self.only_in_first or self.only_in_second)

    @property
    def has_additions(self) -> bool:
        return bool(self.only_in_second)


def _difference(left: list[str], right: list[str]) -> list[str]:
    """Ordered set difference: lines of `left` absent from `right`, deduplicated."""
    excluded = set(right)
    return [line for line in dict.fromkeys(left) if line not in excluded]


def compare_models(first: SchemaModel, second: SchemaModel) -> list[ComparisonRecord]:
    """
    Compare complex types between two schemas.

    Records are ordered by the first model's type order, followed by types
    that only exist in the second model, in its order.

    A type present on one side only is reported with the ENTIRE TYPE marker
    followed by all of its members. For a type on both sides, the members
    are compared as plain sets of description lines.

    Args:
        first: Model of the first (old) schema
        second: Model of the second (new) schema

    Returns:
        One ComparisonRecord per distinct type name

    Example:
        >>> records = compare_models(old_model, new_model)
        >>> [r.type_name for r in records if r.has_additions]
        ['CustomerType']
    """
    records = []
    for type_name in dict.fromkeys([*first, *second]):
        first_type = first.get(type_name)
        second_type = second.get(type_name)

        if first_type is None:
            records.append(
                ComparisonRecord(
                    type_name,
                    only_in_second=ENTIRE_TYPE_MARKER + ", ".join(second_type.all_members()),
                )
            )
        elif second_type is None:
            records.append(
                ComparisonRecord(
                    type_name,
                    only_in_first=ENTIRE_TYPE_MARKER + ", ".join(first_type.all_members()),
                )
            )
        else:
            first_members = first_type.all_members()
            second_members = second_type.all_members()
            records.append(
                ComparisonRecord(
                    type_name,
                    only_in_first=", ".join(_difference(first_members, second_members)),
                    only_in_second=", ".join(_difference(second_members, first_members)),
                )
            )

    return records


def summarize_records(records: list[ComparisonRecord]) -> dict[str, int]:
    """
    Count analysed types, types with differences and types with additions.

    Example:
        >>> summarize_records(records)
        {'types': 12, 'with_differences': 3, 'with_additions': 2}
    """
    return {
        "types": len(records),
        "with_differences": sum(1 for r in records if r.has_differences),
        "with_additions": sum(1 for r in records if r.has_additions),
    }
