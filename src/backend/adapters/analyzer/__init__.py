"""Normalize remote analyzer payloads into canonical outcome sets (no I/O)."""

from .outcomes import outcomes_from_payload

__all__ = ["outcomes_from_payload"]
