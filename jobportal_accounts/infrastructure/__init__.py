"""Infrastructure layer: MongoDB persistence and external service clients."""
