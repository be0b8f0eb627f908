# monitoring/views.py
"""
Views for the monitoring application.

This module provides an administrative view for inspecting
application logs directly through the browser.
"""

from django.contrib.admin.views.decorators import staff_member_required
from django.http import HttpResponse

from .html_logger import log_file


@staff_member_required
def logs_view(request):
    """
    Display application logs as HTML content.

    Restricted to staff members only. The log file is already a
    complete HTML document and is returned as-is.

    Parameters
    ----------
    request : HttpRequest
        The current HTTP request.

    Returns
    -------
    HttpResponse
        The log HTML, or a placeholder message if no log file exists yet.
    """
    path = log_file()

    # Read the log file if available, otherwise fallback with a placeholder
    if path.exists():
        with path.open("r", encoding="utf-8") as f:
            html = f.read()
    else:
        html = "<p>No logs yet.</p>"

    return HttpResponse(html)
