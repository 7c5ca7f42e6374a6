# CollectForge - A Generic Collection Library
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Weak-Key Reclamation Monitoring

WeakMap entries disappear when the garbage collector reclaims their keys,
which makes "why is this entry still here" (or "why did it vanish") hard to
answer. This module provides:
- collect(): a full, all-generation garbage collection
- ReclamationProfiler: snapshots of process memory, GC counters and the
  live entry counts of watched weak maps, with before/after measurement
  around a forced collection and a plain-text report
"""

from __future__ import annotations

import gc
import logging
import os
import time
import weakref
from typing import Any

import psutil

logger = logging.getLogger(__name__)


def collect() -> int:
    """
    Force a full garbage collection.

    Objects only kept alive by reference cycles are reclaimed here, and the
    weak-reference callbacks of reclaimed WeakMap keys have run by the time
    this returns.

    Returns:
        Number of unreachable objects found across all generations
    """
    collected = sum(gc.collect(generation) for generation in range(3))
    logger.debug("forced collection found %d unreachable objects", collected)
    return collected


class ReclamationProfiler:
    """
    Tracks process memory and weak-map sizes across garbage collections.

    Watched maps are held weakly, so watching a map never extends its life.
    """

    def __init__(self) -> None:
        self.process = psutil.Process(os.getpid())
        self.snapshots: list[dict[str, Any]] = []
        self.gc_stats: list[dict[str, Any]] = []
        self.start_time = time.perf_counter()

        # {label: weakref to watched map}
        self.watched: dict[str, weakref.ref] = {}

    def watch(self, weak_map: Any, label: str | None = None) -> str:
        """Register *weak_map* for entry counting; returns the label used."""
        label = label or f"map-{len(self.watched)}"
        self.watched[label] = weakref.ref(weak_map)
        return label

    def _map_sizes(self) -> dict[str, int | None]:
        sizes = {}
        for label, ref in self.watched.items():
            weak_map = ref()
            sizes[label] = len(weak_map) if weak_map is not None else None
        return sizes

    def take_snapshot(self, label: str) -> dict[str, Any]:
        """
        Take a memory snapshot.

        Args:
            label: Description of when this snapshot was taken

        Returns:
            Dictionary containing the memory metrics
        """
        memory_info = self.process.memory_info()
        gc_stats = gc.get_stats()

        snapshot = {
            'timestamp': time.perf_counter() - self.start_time,
            'label': label,
            'process_memory': {
                'rss_mb': memory_info.rss / 1024 / 1024,  # Resident Set Size
                'vms_mb': memory_info.vms / 1024 / 1024,  # Virtual Memory Size
            },
            'garbage_collection': {
                'counts': gc.get_count(),  # (gen0, gen1, gen2) pending collections
                'total_collections': sum(stat['collections'] for stat in gc_stats),
            },
            'weak_maps': self._map_sizes(),
        }

        self.snapshots.append(snapshot)
        return snapshot

    def force_gc_and_measure(self, label: str) -> tuple[dict[str, Any], dict[str, Any]]:
        """
        Force garbage collection and measure before/after.

        Returns:
            Tuple of (before_snapshot, after_snapshot)
        """
        before = self.take_snapshot(f"{label}_before_gc")
        collected = collect()
        after = self.take_snapshot(f"{label}_after_gc")

        reclaimed = {}
        for map_label, size_before in before['weak_maps'].items():
            size_after = after['weak_maps'].get(map_label)
            if size_before is not None and size_after is not None:
                reclaimed[map_label] = size_before - size_after

        self.gc_stats.append({
            'timestamp': time.perf_counter() - self.start_time,
            'label': label,
            'objects_collected': collected,
            'memory_freed_mb': before['process_memory']['rss_mb'] - after['process_memory']['rss_mb'],
            'entries_reclaimed': reclaimed,
        })

        return before, after

    def generate_report(self) -> str:
        """Generate a plain-text reclamation report."""
        if not self.snapshots:
            return "No memory snapshots available"

        report = []
        report.append("=" * 80)
        report.append("COLLECTFORGE RECLAMATION REPORT")
        report.append("=" * 80)

        last = self.snapshots[-1]
        report.append("\nCURRENT STATUS:")
        report.append(f"  RSS Memory: {last['process_memory']['rss_mb']:.2f} MB")
        report.append(f"  VMS Memory: {last['process_memory']['vms_mb']:.2f} MB")
        for map_label, size in last['weak_maps'].items():
            status = f"{size} entries" if size is not None else "released"
            report.append(f"  {map_label}: {status}")

        if self.gc_stats:
            report.append("\nGARBAGE COLLECTION ACTIVITY:")
            report.append(f"  Forced Collections: {len(self.gc_stats)}")
            for stat in self.gc_stats:
                reclaimed = sum(stat['entries_reclaimed'].values())
                report.append(
                    f"  {stat['label']:20} - {stat['objects_collected']:,} objects - {reclaimed} entries reclaimed"
                )

        report.append("\nMEMORY SNAPSHOTS:")
        for snapshot in self.snapshots:
            report.append(
                f"  {snapshot['timestamp']:6.2f}s - {snapshot['label']:20} - {snapshot['process_memory']['rss_mb']:6.2f} MB"
            )

        report.append("=" * 80)

        return "\n".join(report)
