from django.db import models
from stocks.models import Stock


class Comment(models.Model):
    stock = models.ForeignKey(
        Stock,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="comments",
    )

    class Meta:
        ordering = ["id"]

    def __str__(self):
        return f"Comment {self.pk} on {self.stock_id}"
