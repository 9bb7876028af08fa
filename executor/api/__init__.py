"""HTTP API for the bytecode builder."""
