from django.urls import path
from . import views

urlpatterns = [
    path('', views.home, name='home'),
    path('accesso/', views.accesso, name='accesso'),
    path('esci/', views.esci, name='esci'),
    path('api/persone/', views.api_persone, name='api_persone'),
    path('api/ruota/', views.api_ruota, name='api_ruota'),
    path('api/gira/', views.api_gira_ruota, name='api_gira_ruota'),
    path('api/completa/', views.api_completa_giro, name='api_completa_giro'),
]
