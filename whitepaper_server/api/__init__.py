"""HTTP API for Whitepaper Server."""
