"""
URL configuration for asso_project.

Layout:
    /                 public home and content pages
    /events/          public events, member registration
    /site/            public site configuration
    /auth/            login, registration, tokens
    /member/          member area
    /admin/           back office (administrators)
    /django-admin/    Django admin site
    /uploads/         uploaded media
"""
from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path

from asso_project import views

member_patterns = [
    path('', views.member_dashboard, name='member_dashboard'),
    path('', include('core.user_accounts.member_urls')),
    path('', include('events.member_urls')),
    path('', include('cafeteria.member_urls')),
]

admin_patterns = [
    path('', views.admin_dashboard, name='admin_dashboard'),
    path('', include('core.user_accounts.admin_urls')),
    path('', include('core.site_settings.admin_urls')),
    path('', include('core.media_library.admin_urls')),
    path('', include('events.admin_urls')),
    path('', include('content.admin_urls')),
    path('cafeteria/', include('cafeteria.admin_urls')),
    path('payments/', include('payments.admin_urls')),
]

urlpatterns = [
    path('django-admin/', admin.site.urls),
    path('auth/', include('core.user_accounts.auth_urls')),
    path('events/', include('events.urls')),
    path('site/', include('core.site_settings.urls')),
    path('unauthorized/', views.unauthorized, name='unauthorized'),
    path('dashboard/', views.dashboard_redirect, name='dashboard'),
    path('member/', include(member_patterns)),
    path('admin/', include(admin_patterns)),
    path('', include('content.urls')),
]

urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
