"""Structured store file loaders."""
