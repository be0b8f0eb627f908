"""
ASGI config for the orphanage project.

This module exposes the ASGI callable as a module-level variable
named ``application``, for servers such as Daphne, Uvicorn or Hypercorn.
"""

import os
from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "orphanage.settings")

#: The ASGI application callable used by ASGI servers
application = get_asgi_application()
