# notifications/api/views/registration_notifier.py
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from notifications.application.configuration import RegistrationNotifierConfiguration


class RegistrationNotifierView(APIView):
    permission_classes = [IsAdminUser]

    @extend_schema(
        tags=["Notifications"],
        operation_id="notifications_registration_notifier",
        responses={
            200: OpenApiResponse(
                response={
                    "type": "object",
                    "properties": {
                        "mode": {"type": "string", "enum": ["IMMEDIATE", "EMAIL_VERIFICATION"]},
                        "recipients": {"type": "array", "items": {"type": "string"}},
                        "template_id": {"type": "string"},
                        "sender": {"type": "string"},
                        "isolate_failures": {"type": "boolean"},
                    },
                },
                description="Política de notificación de registro tal como se resuelve ahora.",
            )
        },
    )
    def get(self, request):
        conf = RegistrationNotifierConfiguration()
        policy = conf.get_policy()
        return Response(
            {
                "mode": policy.mode.value,
                "recipients": list(policy.recipients),
                "template_id": policy.template_id,
                "sender": conf.get_admin_email(),
                "isolate_failures": conf.isolate_failures(),
            }
        )
