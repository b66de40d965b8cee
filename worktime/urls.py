from django.urls import path

from .views import bulk_delete, entry_detail, entry_list

urlpatterns = [
    path("entries/", entry_list, name="entry-list"),
    path("entries/bulk-delete/", bulk_delete, name="entry-bulk-delete"),
    path("entries/<str:entry_date>/", entry_detail, name="entry-detail"),
]
