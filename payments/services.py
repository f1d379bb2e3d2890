import logging
from datetime import date, datetime, time
from decimal import Decimal

from dateutil.relativedelta import relativedelta
from django.core.exceptions import ValidationError
from django.db.models import Count, DecimalField, ExpressionWrapper, F, Sum
from django.utils import timezone

from cafeteria.models import OrderItem, OrderStatus

logger = logging.getLogger(__name__)

PERIOD_PRESETS = {
    'today': relativedelta(),
    'week': relativedelta(weeks=1),
    'month': relativedelta(months=1),
    'year': relativedelta(years=1),
}
DEFAULT_PERIOD = 'month'


def resolve_period(query_params, today=None):
    """
    Turn ``?period=`` or ``?start_date=&end_date=`` into a (start, end)
    pair of dates. Explicit dates win over the preset.
    """
    today = today or timezone.localdate()
    start = query_params.get('start_date')
    end = query_params.get('end_date')

    if start or end:
        try:
            start_date = date.fromisoformat(start) if start else today
            end_date = date.fromisoformat(end) if end else today
        except ValueError:
            raise ValidationError('Dates must use the YYYY-MM-DD format')
        if start_date > end_date:
            raise ValidationError('Start date must be before end date')
        return start_date, end_date

    period = (query_params.get('period') or DEFAULT_PERIOD).lower()
    if period not in PERIOD_PRESETS:
        raise ValidationError(f"Unknown period '{period}'")
    return today - PERIOD_PRESETS[period], today


class ProfitService:
    """Margins of the cafeteria, from delivered orders"""

    @staticmethod
    def get_profit_stats(start_date: date, end_date: date) -> dict:
        """
        Revenue, cost and gross profit of DELIVERED orders created between
        the two dates (inclusive, site time zone). Items whose product has
        no cost price add revenue but no cost.
        """
        tz = timezone.get_current_timezone()
        start = timezone.make_aware(datetime.combine(start_date, time.min), tz)
        end = timezone.make_aware(datetime.combine(end_date, time.max), tz)

        items = OrderItem.objects.filter(
            order__status=OrderStatus.DELIVERED,
            order__created_at__gte=start,
            order__created_at__lte=end,
        )
        money = DecimalField(max_digits=14, decimal_places=2)
        totals = items.aggregate(
            revenue=Sum(ExpressionWrapper(F('price') * F('quantity'), output_field=money)),
            cost=Sum(ExpressionWrapper(F('product__cost_price') * F('quantity'), output_field=money)),
            items_sold=Sum('quantity'),
            orders_count=Count('order', distinct=True),
        )

        revenue = totals['revenue'] or Decimal('0')
        cost = totals['cost'] or Decimal('0')
        gross_profit = revenue - cost
        margin = (gross_profit / revenue * 100) if revenue else Decimal('0')

        return {
            'start_date': start_date.isoformat(),
            'end_date': end_date.isoformat(),
            'total_revenue': float(revenue),
            'total_cost': float(cost),
            'gross_profit': float(gross_profit),
            'profit_margin': round(float(margin), 2),
            'items_sold': totals['items_sold'] or 0,
            'orders_count': totals['orders_count'],
        }
