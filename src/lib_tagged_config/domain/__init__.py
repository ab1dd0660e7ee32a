"""Error taxonomy and qualified-key rules, free of I/O."""
