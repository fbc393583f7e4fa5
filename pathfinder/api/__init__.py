"""HTTP API for route discovery."""
