import logging

from django.contrib import messages
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import redirect, render
from django.views import View
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from core.exceptions import MissingFieldError, SampleValidationError
from core.tracker import CorrelationTracker
from samples.stores import build_tracker

logger = logging.getLogger(__name__)

ADDED_MESSAGE = "Data added successfully!"
CLEARED_MESSAGE = "All data has been cleared."


def render_tracker(
    request: HttpRequest,
    tracker: CorrelationTracker,
    pending: dict[str, str] | None = None,
    status_code: int = 200,
) -> HttpResponse:
    return render(
        request,
        "samples/tracker.html",
        {
            "snapshot": tracker.snapshot(),
            "pending": pending or {"rainfall": "", "yield": ""},
        },
        status=status_code,
    )


class TrackerPageView(View):
    def get(self, request: HttpRequest) -> HttpResponse:
        return render_tracker(request, build_tracker(request))


class AddSampleView(View):
    def post(self, request: HttpRequest) -> HttpResponse:
        tracker = build_tracker(request)
        raw_rain = request.POST.get("rainfall", "")
        raw_yield = request.POST.get("yield", "")

        try:
            tracker.submit(raw_rain, raw_yield)
        except SampleValidationError as e:
            logger.info("Rejected sample (%s): %r, %r", e.code, raw_rain, raw_yield)
            messages.error(request, e.message)
            return render_tracker(
                request,
                tracker,
                pending={"rainfall": raw_rain, "yield": raw_yield},
                status_code=400,
            )

        messages.success(request, ADDED_MESSAGE)
        return redirect("tracker")


class ClearSamplesView(View):
    def post(self, request: HttpRequest) -> HttpResponse:
        build_tracker(request).clear()
        messages.success(request, CLEARED_MESSAGE)
        return redirect("tracker")


class SamplesView(APIView):
    permission_classes = ()
    authentication_classes = ()

    def get(self, request: Request) -> HttpResponse:
        tracker = build_tracker(request)
        return JsonResponse(tracker.snapshot().model_dump(mode="json"))

    def post(self, request: Request) -> HttpResponse:
        # JSON arrays and scalars parse fine but carry no fields
        if not isinstance(request.data, dict):
            error = MissingFieldError()
            return Response(
                {"error": error.code, "message": error.message},
                status=status.HTTP_400_BAD_REQUEST,
            )

        tracker = build_tracker(request)
        raw_rain = request.data.get("rainfall")  # type: ignore
        raw_yield = request.data.get("yield")  # type: ignore

        try:
            tracker.submit(raw_rain, raw_yield)
        except SampleValidationError as e:
            logger.info("Rejected sample (%s): %r, %r", e.code, raw_rain, raw_yield)
            return Response(
                {"error": e.code, "message": e.message},
                status=status.HTTP_400_BAD_REQUEST,
            )

        return JsonResponse(
            {**tracker.snapshot().model_dump(mode="json"), "message": ADDED_MESSAGE}
        )

    def delete(self, request: Request) -> HttpResponse:
        return clear_samples(request)


class ClearSamplesAPIView(APIView):
    permission_classes = ()
    authentication_classes = ()

    def post(self, request: Request) -> HttpResponse:
        return clear_samples(request)


def clear_samples(request: Request) -> HttpResponse:
    tracker = build_tracker(request)
    tracker.clear()
    return JsonResponse(
        {**tracker.snapshot().model_dump(mode="json"), "message": CLEARED_MESSAGE}
    )
