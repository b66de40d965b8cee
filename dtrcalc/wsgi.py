"""
WSGI config for dtrcalc project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "dtrcalc.settings")

application = get_wsgi_application()
