"""Kernel – value types, errors and time ports shared by every layer."""
