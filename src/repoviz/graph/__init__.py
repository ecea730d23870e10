"""Rendering-boundary helpers."""

from .export import to_json, to_render_payload

__all__ = ["to_json", "to_render_payload"]
