# /django_ui/urls.py
from django.urls import path

from django_ui import views

urlpatterns = [
    path("", views.index, name="index"),
]
