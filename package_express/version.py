"""Package Express calculator version."""

VERSION = "1.0.0"
