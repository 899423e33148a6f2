import django
from django.conf import settings


def pytest_configure():
    if not settings.configured:
        settings.configure(
            INSTALLED_APPS=['shamsi'],
            TEMPLATES=[{'BACKEND': 'django.template.backends.django.DjangoTemplates'}],
            USE_TZ=False,
        )
        django.setup()
