"""
URL configuration for the oumasite project.
"""
from django.conf import settings
from django.urls import include, path, re_path
from django.views.static import serve

urlpatterns = [
    # Admin console (custom, session based)
    path('admin/', include('website.admin_urls')),

    # Public site + chat JSON endpoints
    path('', include('website.urls')),

    # Uploaded media: /images/, /videos/, /docs/
    re_path(
        r'^(?P<path>(?:%s)/.+)$' % '|'.join(settings.UPLOAD_FOLDERS),
        serve,
        {'document_root': settings.MEDIA_ROOT},
    ),
]
