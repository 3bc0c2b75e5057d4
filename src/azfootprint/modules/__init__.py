"""Reusable building blocks for the azfootprint CLI."""
