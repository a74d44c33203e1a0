"""
URL configuration for administrative API endpoints.
"""

from django.urls import path

from api.admin import views
from core.domain.value_objects import EntityKind

urlpatterns = [
    path(
        "distributors",
        views.DistributorListView.as_view(),
        name="distributors",
    ),
    path(
        "distributors/<uuid:distributor_id>",
        views.DistributorDetailView.as_view(),
        name="distributor-detail",
    ),
    path(
        "distributors/<uuid:entity_id>/toggle-status",
        views.ToggleStatusView.as_view(entity_kind=EntityKind.DISTRIBUTOR),
        name="distributor-toggle-status",
    ),
    path(
        "locations",
        views.LocationCreateView.as_view(),
        name="locations",
    ),
    path(
        "locations/<uuid:location_id>",
        views.LocationDetailView.as_view(),
        name="location-detail",
    ),
    path(
        "locations/<uuid:entity_id>/toggle-status",
        views.ToggleStatusView.as_view(entity_kind=EntityKind.LOCATION),
        name="location-toggle-status",
    ),
    path(
        "sellers",
        views.SellerCreateView.as_view(),
        name="sellers",
    ),
    path(
        "sellers/<uuid:entity_id>/toggle-status",
        views.ToggleStatusView.as_view(entity_kind=EntityKind.SELLER),
        name="seller-toggle-status",
    ),
]
