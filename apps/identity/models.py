import uuid
from django.db import models


class User(models.Model):
    """
    Identity record keyed by the email claim of a verified token.

    Rows are created lazily on a user's first authenticated request and are
    never updated afterwards.
    """
    user_id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.CharField(max_length=320, unique=True)

    class Meta:
        db_table = 'users'

    def __str__(self):
        return self.email
