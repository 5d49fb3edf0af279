import django_filters

from modules.orders.constants import OrderStatus, ShippingStatus
from modules.orders.models import ExportOrder, Order


class OrderFilter(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(choices=OrderStatus.choices)
    supplier = django_filters.NumberFilter(field_name="supplier_id")
    product = django_filters.NumberFilter(field_name="product_id")
    start_date = django_filters.DateFilter(field_name="order_date", lookup_expr="date__gte")
    end_date = django_filters.DateFilter(field_name="order_date", lookup_expr="date__lte")

    class Meta:
        model = Order
        fields = ["status", "supplier", "product", "start_date", "end_date"]


class ExportOrderFilter(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(choices=OrderStatus.choices)
    shipping_status = django_filters.ChoiceFilter(choices=ShippingStatus.choices)
    customer = django_filters.NumberFilter(field_name="customer_id")
    product = django_filters.NumberFilter(field_name="product_id")
    start_date = django_filters.DateFilter(field_name="order_date", lookup_expr="date__gte")
    end_date = django_filters.DateFilter(field_name="order_date", lookup_expr="date__lte")

    class Meta:
        model = ExportOrder
        fields = [
            "status",
            "shipping_status",
            "customer",
            "product",
            "start_date",
            "end_date",
        ]
