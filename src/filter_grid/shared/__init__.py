"""Shared types and exceptions."""
