"""Foodie Finder: restaurant discovery API and client state layer."""
