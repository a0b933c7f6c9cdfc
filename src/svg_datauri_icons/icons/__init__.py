"""Module initialization."""
