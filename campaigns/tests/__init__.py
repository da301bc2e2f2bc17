"""Tests for campaigns, memberships and invites."""
