"""Category model.

Categories group products; a product must reference an existing category.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import MasterDataModel


class Category(MasterDataModel):
    category_id = models.BigAutoField(primary_key=True)
    category_name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")

    class Meta:
        db_table = "categories"
        ordering = ["category_id"]
        verbose_name_plural = "categories"

    def __str__(self) -> str:
        return self.category_name
