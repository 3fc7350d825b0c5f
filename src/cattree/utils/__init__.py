"""Utility helpers for cattree."""
