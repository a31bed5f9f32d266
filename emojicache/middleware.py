import traceback

from django.http import JsonResponse


class JsonExceptionMiddleware:
    """
    Turn any unhandled view exception into a JSON 500:
    {"message": "<error message>"}, or "Internal Server Error" when the
    exception has no message.

    The process never goes down because of a bad request; handler500 still
    covers errors raised outside of views.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        print(f"❌ Error: {''.join(traceback.format_exception(exception))}")
        message = str(exception) or "Internal Server Error"
        return JsonResponse({"message": message}, status=500)
