"""
URL configuration for customer API endpoints.
"""

from django.urls import path

from api.customer import views

urlpatterns = [
    path(
        "access",
        views.CustomerAccessView.as_view(),
        name="customer-access",
    ),
]
