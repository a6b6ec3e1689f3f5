"""Tests for the forest-fire simulation."""
