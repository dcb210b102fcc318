class EvoCoreError(Exception):
    """Base for all EvoCore exceptions."""

    pass


# Argument validation families
class InvalidArgumentError(EvoCoreError, ValueError):
    """Bad construction or call parameters."""

    pass


class DimensionMismatchError(InvalidArgumentError):
    """Vector length disagrees with the problem dimension or objective count."""

    pass


class OutOfRangeError(EvoCoreError, IndexError):
    """Index exceeds the population size."""

    pass


# Snapshot subtypes
class SerializationError(EvoCoreError):
    """Malformed snapshot or unknown type tag."""

    pass
