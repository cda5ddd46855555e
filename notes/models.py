from django.db import models
from django.contrib.auth.models import User


class Note(models.Model):
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="notes")
    title = models.CharField(max_length=255)
    content = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return self.title


class NoteLink(models.Model):
    """Directed parent -> child edge between two notes of the same user."""

    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="note_links")
    source = models.ForeignKey(Note, on_delete=models.CASCADE, related_name="child_links")
    target = models.ForeignKey(Note, on_delete=models.CASCADE, related_name="parent_links")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]
        constraints = [
            # A note has at most one parent.
            models.UniqueConstraint(fields=["user", "target"], name="uniq_note_parent_per_user"),
        ]

    def __str__(self):
        return f"{self.source_id} -> {self.target_id}"
