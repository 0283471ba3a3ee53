from django.db import models


class Task(models.Model):
    """
    A to-do item owned by exactly one user.

    Only ever addressed together with its owner; see `apps.tasks.services`.
    """
    id = models.AutoField(primary_key=True)
    task = models.TextField(blank=True, default='')
    status = models.BooleanField(default=False)
    user = models.ForeignKey(
        'identity.User',
        on_delete=models.CASCADE,
        db_column='user_uuid',
        related_name='tasks',
    )

    class Meta:
        db_table = 'tasks'
        ordering = ['id']

    def __str__(self):
        return f"#{self.id} {self.task}"
