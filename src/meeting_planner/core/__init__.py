"""Shared primitives: errors, enums, clock, ids, configuration."""
