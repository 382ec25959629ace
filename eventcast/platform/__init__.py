"""Platform layer: infrastructure shared by the adapters."""
