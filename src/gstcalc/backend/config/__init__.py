"""YAML-backed configuration for GST rate categories."""
