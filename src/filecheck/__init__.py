"""filecheck - content-addressed file tree inventories and change audits."""

__version__ = "0.1.0"
