"""Protocols the resolution engine depends on."""
