from django.urls import re_path

from emojicache import views

handler404 = "emojicache.views.custom_404_view"
handler500 = "emojicache.views.custom_500_view"

urlpatterns = [
    # trailing slash optional: /foo and /foo/ are the same item
    re_path(r"^(?P<item_id>[^/]+)/?$", views.emoji, name="emoji"),
    # everything else, even with DEBUG on
    re_path(r"", views.not_found, name="not_found"),
]
