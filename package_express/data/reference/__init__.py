"""Package Express reference data: acceptance limits and console messages."""
