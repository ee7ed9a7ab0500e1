"""Kernel – errors, time and DDD ports shared by every layer."""
