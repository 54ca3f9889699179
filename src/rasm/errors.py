"""
Exceptions raised by rasm.

Every error is fatal to the render in progress: :py:meth:`Canvas.save` only
writes the output file after every queued drawable has been composited.
"""


class RasmError(Exception):
    """Base class of rasm errors."""


class ConfigurationError(RasmError, ValueError):
    """Unknown output format, unknown object kind or unsupported encoding."""


class ManifestError(RasmError, ValueError):
    """Malformed manifest."""


class BoundsError(RasmError, IndexError):
    """A drawable's placement or extent falls outside its target."""


class ResizeError(RasmError, ValueError):
    """Invalid resize target."""
