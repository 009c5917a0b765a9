"""Infrastructure layer: persistence, HTTP routers and framework wiring."""
