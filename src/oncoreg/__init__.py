"""oncoreg — cancer-registry field codes and identifier validation."""

__version__ = "0.1.0"
