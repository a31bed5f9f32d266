from django.conf import settings
from django.http import FileResponse, JsonResponse

from emojicache.errors import ImageNotFound
from emojicache.lookup import content_type_for, lookup


def not_found_response(message="Not Found"):
    return JsonResponse({"success": False, "message": message}, status=404)


def emoji(request, item_id):
    if request.method not in ("GET", "HEAD"):
        return not_found_response()

    try:
        path = lookup(item_id, settings.EMOJI_DIR)
    except ImageNotFound:
        return not_found_response("Image Not Found")

    return FileResponse(open(path, "rb"), content_type=content_type_for(path))


def not_found(request):
    return not_found_response()


def custom_404_view(request, exception):
    return not_found_response()


def custom_500_view(request):
    return JsonResponse({"message": "Internal Server Error"}, status=500)
