"""
Salmon Supply Chain Django adapter URL routing.
"""

from django.urls import path

from adapters.django_api import views


urlpatterns = [
    path("chaincodes/salmon/init", views.chaincode_init_view),
    path("chaincodes/salmon/invoke", views.chaincode_invoke_view),
    path("chaincodes/salmon/query", views.chaincode_query_view),
]
