"""Core models and utilities shared across yabridgectl."""
