"""FounderFuel command-line interface."""
