"""Operating system facade."""
