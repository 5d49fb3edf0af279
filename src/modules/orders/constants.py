"""Order domain constants.

Status values and the status dimensions built from them.  There is no
transition graph: any value of a dimension may follow any other.
"""

from django.db import models

from modules.core.status_policy import choices_dimension


class OrderStatus(models.TextChoices):
    PENDING = "Pending", "Pending"
    COMPLETED = "Completed", "Completed"
    CANCELLED = "Cancelled", "Cancelled"


class ShippingStatus(models.TextChoices):
    PENDING = "Pending", "Pending"
    IN_TRANSIT = "In Transit", "In Transit"
    DELIVERED = "Delivered", "Delivered"
    RETURNED = "Returned", "Returned"
    FAILED = "Failed", "Failed"


ORDER_STATUS = choices_dimension(
    "status", OrderStatus.values, default=OrderStatus.PENDING
)
SHIPPING_STATUS = choices_dimension(
    "shipping_status", ShippingStatus.values, default=ShippingStatus.PENDING
)
