"""Ports and adapters for tag strategies, key-value sources, and stores."""
