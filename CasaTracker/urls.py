from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),

    # App URLs
    path('accounts/', include('accounts.urls', namespace='accounts')),
    path('cases/', include('cases.urls', namespace='cases')),

    # Core (Dashboard)
    path('', include('core.urls', namespace='core')),
]
