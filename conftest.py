# conftest.py
import os

import django
from django.conf import settings

# Minimal in-process Django settings so tests can render templates
# without a project settings module.
project_root = os.path.abspath(os.path.dirname(__file__))


def pytest_configure():
    if settings.configured:
        return
    settings.configure(
        DEBUG=False,
        SECRET_KEY="tagstoo-tests",
        INSTALLED_APPS=["tagstoo"],
        TEMPLATES=[
            {
                "BACKEND": "django.template.backends.django.DjangoTemplates",
                "DIRS": [os.path.join(project_root, "tests", "templates")],
                "APP_DIRS": False,
            }
        ],
    )
    django.setup()
