"""CSI (Control Sequence Introducer) decoding package.

Provides the fixed-capacity parameter set, packed command identifiers
and the structure scanner that fills them from a ByteCursor.

Python 3.13+.
"""

from .command import CSICommand, pack_command
from .params import CSIParam, Subparameter
from .scanner import CSIScanResult, ScanStatus, parse_csi, scan_csi

__all__ = [
    "CSICommand",
    "CSIParam",
    "CSIScanResult",
    "ScanStatus",
    "Subparameter",
    "pack_command",
    "parse_csi",
    "scan_csi",
]
