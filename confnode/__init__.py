"""A typed configuration tree with JSON and YAML reading, writing, loading and saving."""

__version__ = "0.1.0"
__all__ = ["errors", "nodetype", "node", "json_format", "yaml_format", "files"]