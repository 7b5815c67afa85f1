from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', include('roulette.urls')), # Includiamo gli url della roulette
]
