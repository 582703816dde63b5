"""HTTP entry layer: routers, dependencies and exception handlers."""
