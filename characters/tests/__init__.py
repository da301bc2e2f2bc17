"""Tests for characters."""
