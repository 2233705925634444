"""Command-line entry points (argparse wrappers around the library)."""
