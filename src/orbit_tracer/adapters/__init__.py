# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Adapters for scenario input and trajectory export.

External dependencies (json, csv, file I/O) are confined to this layer.
"""
from orbit_tracer.adapters.csv_exporter import CsvTraceExporter
from orbit_tracer.adapters.json_io import JsonElementsWriter, JsonScenarioReader

__all__ = [
    "CsvTraceExporter",
    "JsonElementsWriter",
    "JsonScenarioReader",
]
