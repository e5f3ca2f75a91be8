"""Exception hierarchy for scarb-eject.

Every fatal condition raised by the library derives from ``EjectError`` so
that the CLI can report it with a single ``except`` clause. Degraded but
successful conditions (unparseable edition, incompatible cfg data) are never
raised; they are logged as warnings by the settings resolver.
"""


class EjectError(Exception):
    """Base class for fatal ejection errors.

    These errors abort the run and are surfaced to the caller with a
    descriptive message.
    """
    pass


class MetadataError(EjectError):
    """The metadata snapshot could not be obtained or decoded.

    Raised when ``scarb metadata`` is missing, fails, times out, or prints
    no usable metadata document.
    """
    pass


class PackageSelectionError(EjectError):
    """The package selector did not resolve to exactly one workspace member."""
    pass


class CompilationUnitNotFoundError(EjectError):
    """No compilation unit of the selected package is suitable for ejection."""
    pass


class ConfigurationError(EjectError):
    """Tool configuration file or inline text is malformed."""
    pass
