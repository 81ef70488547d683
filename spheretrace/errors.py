"""
Exception hierarchy for the sphere tracer
"""


class SphereTraceError(Exception):
    """Base class for all spheretrace errors"""


class DegenerateVectorError(SphereTraceError, ValueError):
    """Raised when a zero-length vector is normalized"""


class ConfigError(SphereTraceError, ValueError):
    """Raised for an invalid render configuration"""


class OutputWriteError(SphereTraceError, RuntimeError):
    """Raised when the rendered image cannot be persisted"""

    def __init__(self, path, reason):
        super().__init__(f"can't save output image to {path}: {reason}")
        self.path = path
        self.reason = reason
