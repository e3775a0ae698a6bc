"""Base class for immutable domain values compared by their attributes."""


class ValueObject:
    """
    Marker base for frozen dataclasses such as ids and owner identities.

    Declare subclasses with @dataclass(frozen=True) so that equality and
    hashing follow the field values; put validation in __post_init__.
    """
