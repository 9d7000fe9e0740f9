"""
Core module - Interfaces, data types and errors for screengen.
"""
from .interfaces import (
    # Data classes
    Thumbnail,
    LayoutParams,
    SheetHeader,
    ScreenlistConfig,

    # Abstract interfaces
    IVideoHandle,
    ICompositor,
    IScreenlistGenerator,
)
from .errors import (
    ScreengenError,
    OpenError,
    ExtractionError,
    EncodingError,
    CompositionError,
    StatError,
)

__all__ = [
    # Data classes
    "Thumbnail",
    "LayoutParams",
    "SheetHeader",
    "ScreenlistConfig",

    # Abstract interfaces
    "IVideoHandle",
    "ICompositor",
    "IScreenlistGenerator",

    # Errors
    "ScreengenError",
    "OpenError",
    "ExtractionError",
    "EncodingError",
    "CompositionError",
    "StatError",
]
