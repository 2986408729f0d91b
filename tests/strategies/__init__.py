"""Hypothesis strategies for VTLexEngine property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules.

- csi: Parameter values, digit runs and complete CSI sequences

Usage:
    from tests.strategies import csi_sequences, parameter_values
    from tests.strategies.csi import GeneratedCSI, render_fields

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - parameter_values, csi_fields, csi_sequences
"""

from .csi import (
    CSIField,
    GeneratedCSI,
    csi_fields,
    csi_sequences,
    digit_runs,
    final_bytes,
    intermediate_bytes,
    optional_values,
    overflowing_digit_runs,
    parameter_values,
    render_fields,
)

__all__ = [
    "CSIField",
    "GeneratedCSI",
    "csi_fields",
    "csi_sequences",
    "digit_runs",
    "final_bytes",
    "intermediate_bytes",
    "optional_values",
    "overflowing_digit_runs",
    "parameter_values",
    "render_fields",
]
