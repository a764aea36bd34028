"""Configuration for newsreel."""
