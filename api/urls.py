"""API URL configuration."""

from django.urls import path

from .views import GraphQLView

app_name = "api"

urlpatterns = [
    path("graphql", GraphQLView.as_view(), name="graphql"),
]
