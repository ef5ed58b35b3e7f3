"""Readers for action script files."""
