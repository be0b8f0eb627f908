# activities/gateways.py
"""
Gateways for staff and child lookups.

The activities core does not own staff or children; it only needs
to know whether a given id exists before writing a reference to it.
This module defines the gateway interface for those lookups, the
local implementation backed by the project's own tables, and a
factory selecting the configured implementation.
"""

from dataclasses import dataclass
from typing import Protocol
import logging

from django.conf import settings
from django.utils.module_loading import import_string

from children.models import Child
from staff.models import Staff

logger = logging.getLogger(__name__)


class DirectoryGateway(Protocol):
    """
    Protocol for staff/child directory gateways.

    Implementations answer presence/absence only; no other field
    of the referenced entities is consumed by the core.
    """

    def staff_exists(self, staff_id: int) -> bool:
        """
        Tell whether a staff member with the given id exists.

        Parameters
        ----------
        staff_id : int
            Id of the staff member.

        Returns
        -------
        bool
            True if the staff member exists.
        """
        ...

    def child_exists(self, child_id: int) -> bool:
        """
        Tell whether a child with the given id exists.

        Parameters
        ----------
        child_id : int
            Id of the child.

        Returns
        -------
        bool
            True if the child exists.
        """
        ...


@dataclass
class LocalDirectoryGateway:
    """
    Local directory gateway implementation.

    Answers lookups directly from the Staff and Child tables.
    """

    def staff_exists(self, staff_id: int) -> bool:
        return Staff.objects.filter(pk=staff_id).exists()

    def child_exists(self, child_id: int) -> bool:
        return Child.objects.filter(pk=child_id).exists()


def get_directory_gateway() -> DirectoryGateway:
    """
    Factory function to select the directory gateway.

    Returns
    -------
    DirectoryGateway
        An instance of the class named by the
        ``ACTIVITIES_DIRECTORY_GATEWAY`` setting (dotted path), or
        the local gateway when the setting is empty.
    """
    path = getattr(settings, "ACTIVITIES_DIRECTORY_GATEWAY", "")
    if path:
        logger.debug("Using directory gateway %s", path)
        return import_string(path)()
    return LocalDirectoryGateway()
