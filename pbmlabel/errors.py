"""Error taxonomy. Every failure is raised where it is detected and propagates to the entry point."""

from __future__ import annotations


class PBMLabelError(Exception):
    """Base class for all pipeline failures."""


class UsageError(PBMLabelError):
    """The command line is missing the input file."""


class IoError(PBMLabelError):
    """The input cannot be opened or holds fewer pixel bytes than the header promises."""


class FormatError(PBMLabelError):
    """The signature does not match or the header is malformed."""


class ResourceError(PBMLabelError):
    """The raster would exceed the configured pixel cap."""


# An allocation failure surfaces as ResourceError under managed memory
AllocationError = ResourceError
