# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CSV trajectory exporter.

Exports propagation samples as CSV, one row per step, for plotting or
drawing the orbit as a connected path.
External dependencies (csv, file I/O) are confined to this adapter.
"""
import csv
import logging

from orbit_tracer.domain.orbit_propagation import OrbitTrace
from orbit_tracer.ports import TraceExporter

logger = logging.getLogger(__name__)

_HEADER = [
    'step', 'time_s', 'true_anomaly_deg',
    'x', 'y', 'z', 'vx', 'vy', 'vz',
    'radius', 'tangential_speed',
]


class CsvTraceExporter(TraceExporter):
    """Exports an orbit trace to CSV."""

    def export(self, trace: OrbitTrace, path: str) -> int:
        if trace.is_partial_arc:
            logger.warning(
                "Exporting a partial arc (%d samples, revolution not completed)",
                len(trace),
            )
        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(_HEADER)
            for s in trace.samples:
                writer.writerow([
                    s.step,
                    f'{s.time_s:.6f}',
                    f'{s.true_anomaly_deg:.6f}',
                    f'{s.position[0]:.9g}',
                    f'{s.position[1]:.9g}',
                    f'{s.position[2]:.9g}',
                    f'{s.velocity[0]:.9g}',
                    f'{s.velocity[1]:.9g}',
                    f'{s.velocity[2]:.9g}',
                    f'{s.radius:.9g}',
                    f'{s.tangential_speed:.9g}',
                ])
        return len(trace.samples)
