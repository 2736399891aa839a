"""Agent skill bundles exposed as invocable tools."""
