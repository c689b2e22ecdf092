from .core.transform import transform_vars
from .core.coalescer import transform_chunks
from .core.settings import TransformOptions

__all__ = ["transform_vars", "transform_chunks", "TransformOptions"]
__version__ = "0.1.0"
