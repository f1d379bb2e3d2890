"""
Back-office payment URLs, mounted under /admin/payments/.
"""
from django.urls import path

from . import views

app_name = 'admin_payments'

urlpatterns = [
    path('status/', views.sumup_status, name='status'),
    path('profile/', views.sumup_profile, name='profile'),
    path('transactions/', views.sumup_transactions, name='transactions'),
    path('payouts/', views.sumup_payouts, name='payouts'),
    path('stats/', views.sumup_stats, name='stats'),
    path('export/csv/', views.sumup_export_csv, name='export_csv'),
    path('export/xlsx/', views.sumup_export_xlsx, name='export_xlsx'),
    path('profit/', views.profit_stats, name='profit'),
]
