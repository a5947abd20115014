"""Application layer: request/response DTOs and account use cases."""
