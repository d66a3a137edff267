"""Command line interface for loading and inspecting the examples."""
