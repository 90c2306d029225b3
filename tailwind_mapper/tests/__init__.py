"""Tests for Tailwind Mapper."""
