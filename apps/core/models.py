# apps/core/models.py
import uuid
from django.db import models
from django.utils.translation import gettext_lazy as _


class CoreBaseModel(models.Model):
    """
    Base model shared by every persisted record:
    - UUID primary key
    - Created/updated timestamps

    Deletes are real deletes. Payments in particular must disappear from the
    ledger sum the moment they are removed.
    """

    # UUID Primary Key
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # Timestamp fields
    created_at = models.DateTimeField(_('created at'), auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(_('updated at'), auto_now=True, db_index=True)

    class Meta:
        abstract = True

    def __str__(self):
        return f"{self.__class__.__name__} {self.id}"
