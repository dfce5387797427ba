"""Scene description paths and values, MaterialX reading and UsdShade material parsing."""

__version__ = "0.1.4"