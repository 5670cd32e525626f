"""Command-line interface for zomboid-scripts."""
