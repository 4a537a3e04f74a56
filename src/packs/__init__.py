"""Pack planner: split item manifests into weight and piece limited packs."""

__version__ = "0.1.0"
