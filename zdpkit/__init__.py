"""Zigbee APS primitives, bindings, touchlink frames, parameters and gateway utilities."""

__version__ = "1.2.0"