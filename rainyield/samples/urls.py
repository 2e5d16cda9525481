from django.urls import path
from . import views

urlpatterns = [
    path("", views.TrackerPageView.as_view(), name="tracker"),
    path("add", views.AddSampleView.as_view(), name="add-sample"),
    path("add/", views.AddSampleView.as_view(), name="add-sample"),
    path("clear", views.ClearSamplesView.as_view(), name="clear-samples"),
    path("clear/", views.ClearSamplesView.as_view(), name="clear-samples"),
    path("api/samples", views.SamplesView.as_view(), name="samples"),
    path("api/samples/", views.SamplesView.as_view(), name="samples"),
    path(
        "api/samples/clear",
        views.ClearSamplesAPIView.as_view(),
        name="samples-clear",
    ),
    path(
        "api/samples/clear/",
        views.ClearSamplesAPIView.as_view(),
        name="samples-clear",
    ),
]
