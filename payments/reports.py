"""
Reports built from SumUp transactions: period statistics and exports.
"""
import csv
from collections import OrderedDict
from datetime import timezone as dt_timezone
from decimal import ROUND_HALF_UP, Decimal
from io import BytesIO, StringIO

from dateutil import parser as date_parser
from django.http import HttpResponse
from django.utils import timezone
from openpyxl import Workbook
from openpyxl.styles import Font

# SumUp does not report fees per transaction; this is the average rate
ESTIMATED_FEE_RATE = Decimal('0.0175')

SUCCESSFUL = 'SUCCESSFUL'
FAILED_STATUSES = ('FAILED', 'CANCELLED')

EXPORT_HEADERS = [
    'Date',
    'Time',
    'Transaction code',
    'Type',
    'Status',
    'Amount',
    'Currency',
    'Payment method',
    'Card',
    'Description',
]

XLSX_CONTENT_TYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'


def _amount(transaction):
    return Decimal(str(transaction.get('amount') or 0))


def _money(value):
    return float(value.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP))


def calculate_period_stats(transactions):
    """
    Aggregate a list of SumUp transactions.

    Revenue only counts SUCCESSFUL transactions; FAILED and CANCELLED ones
    are counted as failures. Days are taken from the raw timestamp and the
    breakdown is sorted by date.
    """
    successful = [t for t in transactions if t.get('status') == SUCCESSFUL]
    failed = [t for t in transactions if t.get('status') in FAILED_STATUSES]

    total_revenue = sum((_amount(t) for t in successful), Decimal('0'))
    total_fees = total_revenue * ESTIMATED_FEE_RATE

    days = OrderedDict()
    for transaction in transactions:
        day = (transaction.get('timestamp') or '').split('T')[0]
        stats = days.setdefault(day, {
            'date': day,
            'total_amount': Decimal('0'),
            'transaction_count': 0,
            'successful_count': 0,
            'failed_count': 0,
        })
        stats['transaction_count'] += 1
        if transaction.get('status') == SUCCESSFUL:
            stats['total_amount'] += _amount(transaction)
            stats['successful_count'] += 1
        elif transaction.get('status') in FAILED_STATUSES:
            stats['failed_count'] += 1

    daily_breakdown = []
    for day in sorted(days):
        stats = days[day]
        average = stats['total_amount'] / stats['successful_count'] if stats['successful_count'] else Decimal('0')
        daily_breakdown.append({
            'date': day,
            'total_amount': _money(stats['total_amount']),
            'transaction_count': stats['transaction_count'],
            'successful_count': stats['successful_count'],
            'failed_count': stats['failed_count'],
            'avg_transaction': _money(average),
            'fees': _money(stats['total_amount'] * ESTIMATED_FEE_RATE),
        })

    average = total_revenue / len(successful) if successful else Decimal('0')
    return {
        'total_revenue': _money(total_revenue),
        'total_transactions': len(transactions),
        'successful_transactions': len(successful),
        'failed_transactions': len(failed),
        'avg_transaction_amount': _money(average),
        'total_fees': _money(total_fees),
        'net_revenue': _money(total_revenue - total_fees),
        'daily_breakdown': daily_breakdown,
    }


def _local_moment(timestamp):
    if not timestamp:
        return None
    moment = date_parser.isoparse(timestamp)
    if timezone.is_naive(moment):
        moment = timezone.make_aware(moment, dt_timezone.utc)
    return timezone.localtime(moment)


def transaction_rows(transactions):
    """
    One export row per transaction, dates in the site time zone.
    A transaction without a timestamp keeps its row with blank date cells.
    """
    rows = []
    for t in transactions:
        moment = _local_moment(t.get('timestamp'))
        card = t.get('card') or {}
        amount = _amount(t).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
        rows.append([
            moment.strftime('%d/%m/%Y') if moment else '',
            moment.strftime('%H:%M:%S') if moment else '',
            t.get('transaction_code', ''),
            t.get('type') or t.get('payment_type', ''),
            t.get('status', ''),
            amount,
            t.get('currency', ''),
            t.get('payment_type', ''),
            f"****{card['last_4_digits']}" if card.get('last_4_digits') else '',
            t.get('product_summary') or '',
        ])
    return rows


def generate_csv(transactions):
    """
    Account journal as CSV text: semicolon separated, comma as decimal
    mark, one header line.
    """
    output = StringIO()
    writer = csv.writer(output, delimiter=';', lineterminator='\n')
    writer.writerow(EXPORT_HEADERS)
    for row in transaction_rows(transactions):
        row[5] = str(row[5]).replace('.', ',')
        writer.writerow(row)
    return output.getvalue()


def generate_workbook(transactions):
    """The same journal as an .xlsx workbook; returns the file bytes."""
    wb = Workbook()
    ws = wb.active
    ws.title = 'Transactions'

    for col_idx, header in enumerate(EXPORT_HEADERS, start=1):
        cell = ws.cell(row=1, column=col_idx, value=header)
        cell.font = Font(bold=True)

    for row_idx, row in enumerate(transaction_rows(transactions), start=2):
        row[5] = float(row[5])
        for col_idx, value in enumerate(row, start=1):
            ws.cell(row=row_idx, column=col_idx, value=value)

    for col in range(1, len(EXPORT_HEADERS) + 1):
        ws.column_dimensions[chr(64 + col)].width = 18

    output = BytesIO()
    wb.save(output)
    return output.getvalue()


def csv_response(transactions, filename):
    response = HttpResponse(generate_csv(transactions), content_type='text/csv; charset=utf-8')
    response['Content-Disposition'] = f'attachment; filename={filename}'
    return response


def workbook_response(transactions, filename):
    response = HttpResponse(generate_workbook(transactions), content_type=XLSX_CONTENT_TYPE)
    response['Content-Disposition'] = f'attachment; filename={filename}'
    return response
