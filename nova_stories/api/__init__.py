"""HTTP API for the NOVA story backend."""
