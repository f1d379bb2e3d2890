"""
Back-office payment views (administrators only).

    GET /admin/payments/status/
    GET /admin/payments/profile/
    GET /admin/payments/transactions/?period=|start_date=&end_date=&status=&payment_type=&limit=
    GET /admin/payments/payouts/?period=|start_date=&end_date=
    GET /admin/payments/stats/?period=|start_date=&end_date=
    GET /admin/payments/export/csv/?period=|start_date=&end_date=
    GET /admin/payments/export/xlsx/?period=|start_date=&end_date=
    GET /admin/payments/profit/?period=|start_date=&end_date=

Provider failures raise PaymentProviderError, answered with 502 by the
exception handler.
"""
from functools import wraps

from django.core.exceptions import ValidationError
from rest_framework.decorators import api_view

from asso_project.response_formatter import error_response, success_response, validation_error_message
from core.permissions.decorators import require_admin

from .reports import calculate_period_stats, csv_response, workbook_response
from .services import ProfitService, resolve_period
from .sumup_client import SumUpClient


def with_sumup_client(view_func):
    """Pass a configured SumUpClient to the view, or answer 400."""
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        client = SumUpClient.from_settings()
        if not client.is_configured:
            return error_response('SumUp is not configured')
        return view_func(request, client, *args, **kwargs)
    return wrapper


def with_period(view_func):
    """Resolve the requested period into ``start_date``/``end_date``."""
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        try:
            start_date, end_date = resolve_period(request.query_params)
        except ValidationError as e:
            return error_response(validation_error_message(e))
        return view_func(request, *args, start_date=start_date, end_date=end_date, **kwargs)
    return wrapper


def _period(start_date, end_date):
    return {'start_date': start_date.isoformat(), 'end_date': end_date.isoformat()}


@api_view(['GET'])
@require_admin
def sumup_status(request):
    client = SumUpClient.from_settings()
    return success_response(data={
        'configured': client.is_configured,
        'merchant_code': client.merchant_code,
    })


@api_view(['GET'])
@require_admin
@with_sumup_client
def sumup_profile(request, client):
    return success_response(data=client.get_merchant_profile())


@api_view(['GET'])
@require_admin
@with_sumup_client
@with_period
def sumup_transactions(request, client, start_date, end_date):
    limit = request.query_params.get('limit')
    if limit is not None and not limit.isdigit():
        return error_response('Limit must be a positive integer')

    transactions = client.get_transactions(
        start_date=start_date,
        end_date=end_date,
        statuses=request.query_params.getlist('status'),
        payment_types=request.query_params.getlist('payment_type'),
        limit=int(limit) if limit else None,
    )
    return success_response(data={
        'period': _period(start_date, end_date),
        'transactions': transactions,
    })


@api_view(['GET'])
@require_admin
@with_sumup_client
@with_period
def sumup_payouts(request, client, start_date, end_date):
    payouts = client.get_payouts(start_date, end_date)
    return success_response(data={
        'period': _period(start_date, end_date),
        'payouts': payouts,
    })


@api_view(['GET'])
@require_admin
@with_sumup_client
@with_period
def sumup_stats(request, client, start_date, end_date):
    transactions = client.get_transactions(start_date=start_date, end_date=end_date)
    return success_response(data={
        'period': _period(start_date, end_date),
        'stats': calculate_period_stats(transactions),
        'transactions': transactions,
    })


@api_view(['GET'])
@require_admin
@with_sumup_client
@with_period
def sumup_export_csv(request, client, start_date, end_date):
    transactions = client.get_transactions(start_date=start_date, end_date=end_date)
    return csv_response(transactions, f'sumup_export_{start_date}_{end_date}.csv')


@api_view(['GET'])
@require_admin
@with_sumup_client
@with_period
def sumup_export_xlsx(request, client, start_date, end_date):
    transactions = client.get_transactions(start_date=start_date, end_date=end_date)
    return workbook_response(transactions, f'sumup_export_{start_date}_{end_date}.xlsx')


@api_view(['GET'])
@require_admin
@with_period
def profit_stats(request, start_date, end_date):
    return success_response(data=ProfitService.get_profit_stats(start_date, end_date))
