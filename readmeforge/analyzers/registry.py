"""Ordered registry of ecosystem detectors."""

from __future__ import annotations

from typing import Callable, List, Sequence, Set

from .base import Detector
from .ecosystems import GoDetector, NodeDetector, PythonDetector, RustDetector

# Probe order is significant: later detections overwrite earlier ones.
_BUILTIN_FACTORIES: dict[str, Callable[[], Detector]] = {
    "node": NodeDetector,
    "python": PythonDetector,
    "go": GoDetector,
    "rust": RustDetector,
}

def discover_detectors(enabled: Sequence[str] | None = None) -> List[Detector]:
    """Return instantiated detectors in priority order, honoring optional enabled names."""

    enabled_set: Set[str] | None = None
    if enabled is not None:
        enabled_set = {name.lower() for name in enabled}
        unknown = enabled_set.difference(_BUILTIN_FACTORIES)
        if unknown:
            missing = ", ".join(sorted(unknown))
            raise ValueError(f"Unknown detectors requested: {missing}")

    detectors: List[Detector] = []
    for name, factory in _BUILTIN_FACTORIES.items():
        if enabled_set is not None and name not in enabled_set:
            continue
        detectors.append(factory())
    return detectors


__all__ = ["discover_detectors"]
