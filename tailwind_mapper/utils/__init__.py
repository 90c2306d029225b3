"""Utilities for Tailwind Mapper."""
