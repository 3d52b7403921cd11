from django.core.management.base import BaseCommand

from accounts.domain.value_objects import LifecycleEventType
from notifications.application.configuration import RegistrationNotifierConfiguration
from notifications.application.policies import should_dispatch

EVENTS = {
    "user_created": LifecycleEventType.USER_CREATED,
    "user_validated": LifecycleEventType.USER_VALIDATED,
}


class Command(BaseCommand):
    help = "Muestra la política de notificación de registro resuelta (no envía nada)."

    def add_arguments(self, parser):
        parser.add_argument("--event", required=False, default=None, choices=sorted(EVENTS))

    def handle(self, *args, **opts):
        conf = RegistrationNotifierConfiguration()
        policy = conf.get_policy()

        self.stdout.write(f"mode={policy.mode.value}")
        self.stdout.write(f"template={policy.template_id}")
        self.stdout.write(f"sender={conf.get_admin_email() or '-'}")
        self.stdout.write(f"isolate_failures={conf.isolate_failures()}")
        if policy.recipients:
            self.stdout.write(f"recipients={','.join(policy.recipients)}")
        else:
            self.stdout.write(self.style.WARNING("recipients=(ninguno): no se enviará ningún correo"))

        names = [opts["event"]] if opts["event"] else sorted(EVENTS)
        for name in names:
            if should_dispatch(policy, EVENTS[name]):
                self.stdout.write(self.style.SUCCESS(f"{name}: NOTIFICA"))
            else:
                self.stdout.write(f"{name}: no notifica")
