"""Growth logger for StrVec

Tracks reallocations, clears and detaches of a vector's backing array
and provides summary statistics. Attach one to a StrVec to check how
often the array is reallocated.
"""

from typing import Dict, List
from dataclasses import dataclass
from enum import Enum


class GrowthEventKind(Enum):
    """Types of backing array events"""
    GROW = "grow"
    CLEAR = "clear"
    DETACH = "detach"


@dataclass
class GrowthRecord:
    """Record of a single backing array event"""
    kind: GrowthEventKind
    count: int
    old_capacity: int
    new_capacity: int


class GrowthLogger:
    """Logs backing array events and provides summaries"""

    def __init__(self) -> None:
        self.records: List[GrowthRecord] = []

    def _log(self, kind: GrowthEventKind, count: int,
             old_capacity: int, new_capacity: int) -> None:
        self.records.append(GrowthRecord(
            kind=kind,
            count=count,
            old_capacity=old_capacity,
            new_capacity=new_capacity
        ))

    def log_grow(self, count: int, old_capacity: int, new_capacity: int) -> None:
        """Log a reallocation of the backing array

        Args:
            count: Number of live strings at the time of growth
            old_capacity: Capacity before reallocation
            new_capacity: Capacity after reallocation
        """
        self._log(GrowthEventKind.GROW, count, old_capacity, new_capacity)

    def log_clear(self, count: int, old_capacity: int) -> None:
        """Log release of every string and the backing array

        Args:
            count: Number of strings released
            old_capacity: Capacity released (0 for the shared empty array)
        """
        self._log(GrowthEventKind.CLEAR, count, old_capacity, 0)

    def log_detach(self, count: int, old_capacity: int) -> None:
        """Log a transfer of the backing array to the caller

        Args:
            count: Number of strings handed over
            old_capacity: Capacity of the array at detach time
        """
        self._log(GrowthEventKind.DETACH, count, old_capacity, 0)

    def reallocations(self) -> List[GrowthRecord]:
        """Get the GROW records in order"""
        return [r for r in self.records if r.kind is GrowthEventKind.GROW]

    def get_summary(self) -> Dict:
        """Get summary statistics

        Returns:
            Dictionary with event counts and peak capacity
        """
        by_kind: Dict[GrowthEventKind, int] = {}
        for record in self.records:
            by_kind[record.kind] = by_kind.get(record.kind, 0) + 1

        grows = self.reallocations()
        return {
            "total_events": len(self.records),
            "events_by_kind": by_kind,
            "total_reallocations": len(grows),
            "peak_capacity": max((r.new_capacity for r in grows), default=0),
            "slots_copied": sum(r.count for r in grows),
        }

    def print_summary(self) -> str:
        """Generate formatted summary string

        Returns:
            Formatted summary as string
        """
        summary = self.get_summary()
        lines = []

        lines.append("=== Growth Summary ===")
        lines.append(f"Reallocations: {summary['total_reallocations']}")
        lines.append(f"Peak capacity: {summary['peak_capacity']}")
        lines.append(f"Slots copied: {summary['slots_copied']}")

        if summary['events_by_kind']:
            lines.append("")
            lines.append("Events by kind:")
            for kind, count in summary['events_by_kind'].items():
                lines.append(f"  {kind.value}: {count}")

        grows = self.reallocations()
        if grows:
            lines.append("")
            lines.append("Reallocation details (top 10):")
            for record in grows[:10]:
                lines.append(
                    f"  {record.old_capacity} → {record.new_capacity} "
                    f"(count {record.count})"
                )

        return "\n".join(lines)

    def clear(self) -> None:
        """Clear all logged records"""
        self.records.clear()
