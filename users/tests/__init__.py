"""Tests for accounts, passwords and session tokens."""
