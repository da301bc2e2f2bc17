from .mixins import NamedModelMixin, PrefixedIdMixin, TimestampedMixin, prefixed_id

__all__ = [
    "TimestampedMixin",
    "NamedModelMixin",
    "PrefixedIdMixin",
    "prefixed_id",
]
