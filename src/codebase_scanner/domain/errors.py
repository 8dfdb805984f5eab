from __future__ import annotations

"""
Domain Exceptions.

Fatal scan failures propagate as ScanError. Manifest problems are raised as
ManifestError and converted into inline notes by the manifest analyzer.
"""


class ScanError(Exception):
    """The scan cannot proceed (missing, invalid, or unreadable root)."""


class ManifestError(ValueError):
    """A build manifest could not be read or parsed."""
