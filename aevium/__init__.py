"""Aevium partner toolkit: signed invitation claims and benefit grants."""
