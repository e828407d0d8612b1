"""Request and response DTOs for the HTTP API."""
