from django.db import models


class StoredValue(models.Model):
    """One key-value entry of a browser's persisted tracker state."""

    class Meta:  # pyright: ignore [reportIncompatibleVariableOverride]
        unique_together = ["namespace", "key"]

    id = models.AutoField(primary_key=True)
    # Session key of the browser that owns the entry
    namespace = models.CharField(max_length=255, db_index=True)
    key = models.CharField(max_length=255)
    value = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.namespace} - {self.key}"
