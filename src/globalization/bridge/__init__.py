"""Bridge between the host application shell and the formatting helpers.

Exports:
    GlobalizationPlugin: Entry points in the host calling convention
    default_plugin: Process-wide plugin for the platform locale
    ActionRegistry: camelCase host action names to entry points
    PluginResult / FailureReport: Success and failure reporting

Python 3.13+.
"""

from .arguments import decode_payload, payload_datetime, payload_string
from .plugin import GlobalizationPlugin, default_plugin
from .registry import ActionRegistry, ActionSignature
from .result import FailureReport, PluginResult

__all__ = [
    "ActionRegistry",
    "ActionSignature",
    "FailureReport",
    "GlobalizationPlugin",
    "PluginResult",
    "decode_payload",
    "default_plugin",
    "payload_datetime",
    "payload_string",
]
