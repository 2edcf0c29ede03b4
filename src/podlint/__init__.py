"""podlint: schema validation for YAML Pod manifests."""

__version__ = "0.1.0"
