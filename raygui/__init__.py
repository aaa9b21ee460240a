"""Camera navigation models, input enumerations and remappable key bindings for a render viewer."""

__version__ = "0.1.0"