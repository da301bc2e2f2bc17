"""
Core model mixins for reusable model functionality.

Available mixins:
- TimestampedMixin: Automatic created_at and updated_at fields
- NamedModelMixin: Standard name field with __str__ method
- PrefixedIdMixin: String primary key of the form "<prefix>_<uuid>"

Usage:
    class Campaign(PrefixedIdMixin, NamedModelMixin, TimestampedMixin):
        ID_PREFIX = "camp"
"""

import uuid

from django.db import models


def prefixed_id(prefix: str) -> str:
    """Return a new random identifier such as ``c_0b6e...``."""
    return f"{prefix}_{uuid.uuid4()}"


class TimestampedMixin(models.Model):
    """
    Mixin to add automatic timestamp tracking to models.

    Provides:
    - created_at: Automatically set when object is first created (indexed)
    - updated_at: Automatically updated every time object is saved (indexed)
    """

    created_at = models.DateTimeField(
        auto_now_add=True,
        db_index=True,
        help_text="Timestamp when the object was created",
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        db_index=True,
        help_text="Timestamp when the object was last modified",
    )

    class Meta:
        abstract = True


class NamedModelMixin(models.Model):
    """
    Mixin to add a standardized name field with __str__ method.

    Provides:
    - name: Required CharField with 100 character limit
    - __str__: Returns the name of the object
    """

    name = models.CharField(max_length=100, help_text="Name of the object")

    def __str__(self):
        return self.name

    class Meta:
        abstract = True


class PrefixedIdMixin(models.Model):
    """
    Mixin for models keyed by readable string identifiers.

    Seeded rows keep their fixed ids ("camp_1", "w_2"); rows created at
    runtime get ``<ID_PREFIX>_<uuid4>`` assigned on first save.
    """

    ID_PREFIX = "obj"

    id = models.CharField(primary_key=True, max_length=64, editable=False)

    def save(self, *args, **kwargs):
        if not self.id:
            self.id = prefixed_id(self.ID_PREFIX)
        super().save(*args, **kwargs)

    class Meta:
        abstract = True
